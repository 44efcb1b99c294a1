#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Mobile Allocation (MAI -> ARFCN)

import operator
import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from hsg import hsg, frame_counters, InvalidInput, MAX_N, MAX_ARFCN

# Example MA used by the brute-force driver
MA_TEST = (813, 820, 826, 850, 857, 880)


class MobileAllocation:
    """
    Ordered list of ARFCNs a link hops across.
    MAI 0 is the first entry, so the list order is part of the link setup.
    """
    def __init__(self, arfcns):
        arfcns = tuple(operator.index(a) for a in arfcns)
        if not arfcns:
            raise InvalidInput("mobile allocation is empty")
        if len(arfcns) > MAX_N:
            raise InvalidInput(f"mobile allocation has {len(arfcns)} entries, max is {MAX_N}")
        for a in arfcns:
            if a < 0 or a > MAX_ARFCN:
                raise InvalidInput(f"ARFCN {a} outside [0, {MAX_ARFCN}]")
        if len(set(arfcns)) != len(arfcns):
            raise InvalidInput("mobile allocation lists an ARFCN twice")
        self.arfcns = arfcns

    @classmethod
    def from_config(cls, cfg):
        """Builds the MA from a parsed YAML config dict."""
        ma_cfg = (cfg or {}).get('mobile_allocation', {}) or {}
        if not isinstance(ma_cfg, dict):
            raise InvalidInput("'mobile_allocation' section is not a mapping")
        return cls(ma_cfg.get('arfcns', MA_TEST))

    def __len__(self):
        return len(self.arfcns)

    def __getitem__(self, mai):
        return self.arfcns[mai]

    def __iter__(self):
        return iter(self.arfcns)

    def __repr__(self):
        return f"MobileAllocation({list(self.arfcns)})"

    def mai(self, t1, t2, t3, maio, hsn):
        return hsg(t1, t2, t3, maio, hsn, len(self.arfcns))

    def arfcn(self, t1, t2, t3, maio, hsn):
        """RFCHN := MA[MAI]"""
        return self.arfcns[self.mai(t1, t2, t3, maio, hsn)]

    def arfcn_for_frame(self, fn, maio, hsn):
        t1, t2, t3 = frame_counters(fn)
        return self.arfcn(t1, t2, t3, maio, hsn)
