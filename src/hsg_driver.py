#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Brute-Force Driver (enumerates every T1/T2/T3/MAIO for one HSN and MA)

import os
import sys
import argparse
import yaml

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from hsg import InvalidInput, MAX_HSN
from mobile_allocation import MobileAllocation
from hsg_vectors import enumerate_vectors, consistency_check, out_of_table

DEFAULT_HSN = 51  # pseudo-random pattern, 0 gives the cyclic one


def load_config(config_path):
    if config_path is None:
        return {}
    with open(config_path, 'r') as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise InvalidInput(f"{config_path} does not hold a mapping")
    return cfg


def format_vector(hsn, row, ma):
    prefix = (f"HSN: {hsn}\tT1: {row['t1']}\tT2: {row['t2']}\tT3: {row['t3']}\t"
              f"MAIO: {row['maio']}\t")
    if not row['in_table']:
        return prefix + "MAI: -\tRNTABLE index out of range"
    mai = int(row['mai'])
    if mai < 0 or mai >= len(ma):
        return "Error: MAI - consistency check failed."
    return prefix + f"MAI: {mai}\tMA[MAI]: {ma[mai]}"


def main(argv=None):
    parser = argparse.ArgumentParser(description="GSM Hopping Sequence Generator - brute-force driver")
    parser.add_argument("--config", default=None, help="YAML file with 'hopping' and 'mobile_allocation' sections")
    parser.add_argument("--hsn", type=int, default=None, help="Hopping Sequence Number (overrides config)")
    parser.add_argument("--check", action="store_true", help="Only run the MAI consistency check")
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many vectors")
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        ma = MobileAllocation.from_config(cfg)
        h_cfg = cfg.get('hopping', {}) or {}
        if not isinstance(h_cfg, dict):
            raise InvalidInput("'hopping' section is not a mapping")
        hsn = args.hsn if args.hsn is not None else h_cfg.get('hsn', DEFAULT_HSN)
        # YAML true/false load as bool, which is an int subclass
        if isinstance(hsn, bool) or not isinstance(hsn, int) or hsn < 0 or hsn > MAX_HSN:
            raise InvalidInput(f"hsn={hsn} outside [0, {MAX_HSN}]")
        if args.limit is not None and args.limit < 0:
            raise InvalidInput(f"--limit {args.limit} is negative")
    except (InvalidInput, TypeError, OSError, yaml.YAMLError) as e:
        print(f"[HSG] Config error: {e}")
        return 2

    n = len(ma)
    vectors = enumerate_vectors(hsn, n)

    if args.check:
        failures = consistency_check(vectors, n)
        print(f"[HSG] HSN: {hsn} | N: {n} | Vectors: {len(vectors)} | "
              f"Out of table: {out_of_table(vectors)} | Failures: {failures}")
        print(f"Consistency check: {'SUCCESS' if failures == 0 else 'FAILURE'}")
        return 0 if failures == 0 else 1

    if args.limit is not None:
        vectors = vectors[:args.limit]
    for row in vectors:
        print(format_vector(hsn, row, ma))
    return 0


if __name__ == "__main__":
    sys.exit(main())
