#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Interactive Demo Script

import os
import sys

# Add src to path
sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from hsg import frame_counters, TableIndexError, HYPERFRAME_PERIOD, MAX_HSN
from mobile_allocation import MobileAllocation, MA_TEST


def describe_frame(fn, maio, hsn, ma):
    t1, t2, t3 = frame_counters(fn)
    mai = ma.mai(t1, t2, t3, maio, hsn)
    return f"FN: {fn} | T1: {t1} T2: {t2} T3: {t3} | MAI: {mai} | ARFCN: {ma[mai]}"


def run_demo():
    print("="*40)
    print("   GSM HOPPING SEQUENCE DEMO   ")
    print("="*40)

    ma = MobileAllocation(MA_TEST)
    hsn = 0
    maio = 0
    fn = 0

    while True:
        try:
            print(f"\nHSN: {hsn} | MAIO: {maio} | MA: {list(ma)}")
            print("Options: [1] Next Frame [2] Set HSN [3] Set MAIO [4] Jump to FN [q] Quit")
            choice = input("Select: ").strip().lower()

            if choice == 'q':
                break
            elif choice == '1':
                current, fn = fn, (fn + 1) % HYPERFRAME_PERIOD
                try:
                    print(f"\n[HSG] {describe_frame(current, maio, hsn, ma)}")
                except TableIndexError as e:
                    print(f"\n[HSG] FN: {current} | {e}")
            elif choice == '2':
                hsn = int(input("HSN (0 = cyclic, 1-63 = pseudo-random): ").strip())
                if hsn < 0 or hsn > MAX_HSN:
                    print(f"HSN must be in 0-{MAX_HSN}.")
                    hsn = 0
            elif choice == '3':
                maio = int(input(f"MAIO (0-{len(ma) - 1}): ").strip()) % len(ma)
            elif choice == '4':
                fn = int(input("Frame number: ").strip()) % HYPERFRAME_PERIOD

        except KeyboardInterrupt:
            break
        except ValueError as e:
            print(f"Error: {e}")

    print("\nExiting Demo.")


if __name__ == "__main__":
    run_demo()
