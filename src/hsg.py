#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Hopping Sequence Generator (3GPP TS 05.02 sec. 6.2.3)

"""
Computes the Mobile Allocation Index (MAI) for a TDMA frame.

FN  := 51 * ((T3 - T2) mod 26) + T3 + 51 * 26 * T1

if HSN == 0:
    MAI := (FN + MAIO) mod N
else:
    M  := (T2 + RNTABLE[HSN xor (T1R + T3)]) mod 2^(NBIN + 1)
    T' := T3 mod 2^(NBIN + 1)
    S  := M if M < N else (M + T') mod N
    MAI := (MAIO + S) mod N

RFCHN := MA[MAI]
"""

import operator

MAX_T1 = 63
MAX_T2 = 25
MAX_T3 = 50
MAX_N = 64
MAX_HSN = 63
MAX_ARFCN = 1023

# 26 * 51 frames per superframe, T1 wraps after 64 superframes
SUPERFRAME_LEN = 26 * 51
HYPERFRAME_PERIOD = SUPERFRAME_LEN * (MAX_T1 + 1)

RNTABLE = (
     48,  98,  63,   1,  36,  95,  78, 102,  94,  73,
      0,  64,  25,  81,  76,  59, 124,  23, 104, 100,
    101,  47, 118,  85,  18,  56,  96,  86,  54,   2,
     80,  34, 127,  13,   6,  89,  57, 103,  12,  74,
     55, 111,  75,  38, 109,  71, 112,  29,  11,  88,
     87,  19,   3,  68, 110,  26,  33,  31,   8,  45,
     82,  58,  40, 107,  32,   5, 106,  92,  62,  67,
     77, 108, 122,  37,  60,  66, 121,  42,  51, 126,
    117, 114,   4,  90,  43,  52,  53, 113, 120,  72,
     16,  49,   7,  79, 119,  61,  22,  84,   9,  97,
     91,  15,  21,  24,  46,  39,  93, 105,  65,  70,
    125,  99,  17, 123,
)


class InvalidInput(ValueError):
    """Raised when a counter or the MA size is outside its valid range."""


class TableIndexError(InvalidInput):
    """Raised when HSN/T1/T3 address an entry beyond the end of RNTABLE."""


def _check(name, value, upper=None, lower=0):
    value = operator.index(value)
    if value < lower:
        raise InvalidInput(f"{name}={value} is below {lower}")
    if upper is not None and value > upper:
        raise InvalidInput(f"{name}={value} exceeds {upper}")
    return value


def _counters(t1, t2, t3):
    return _check("t1", t1, MAX_T1), _check("t2", t2, MAX_T2), _check("t3", t3, MAX_T3)


def _fn(t1, t2, t3):
    # Python's % is a floor-mod, so T3 < T2 still lands in [0, 26)
    return 51 * ((t3 - t2) % 26) + t3 + SUPERFRAME_LEN * t1


def frame_number(t1, t2, t3):
    """Reduced frame number (0 .. HYPERFRAME_PERIOD - 1) rebuilt from T1, T2, T3."""
    return _fn(*_counters(t1, t2, t3))


def frame_counters(fn):
    """Splits a frame number into (T1, T2, T3), with T1 reduced mod 64."""
    fn = _check("fn", fn)
    return (fn // SUPERFRAME_LEN) % (MAX_T1 + 1), fn % 26, fn % 51


def rntable_index(t1, t3, hsn):
    """
    Index into RNTABLE for the pseudo-random path: HSN xor ((T1 mod 64) + T3).
    Some in-range HSN/T1/T3 combinations land past the end of the table;
    those raise TableIndexError.
    """
    t1 = _check("t1", t1, MAX_T1)
    t3 = _check("t3", t3, MAX_T3)
    hsn = _check("hsn", hsn)
    idx = hsn ^ ((t1 % 64) + t3)
    if idx >= len(RNTABLE):
        raise TableIndexError(f"RNTABLE index {idx} out of range (hsn={hsn}, t1={t1}, t3={t3})")
    return idx


def hsg(t1, t2, t3, maio, hsn, n):
    """
    Returns the MAI in [0, n) for the given frame counters.
    HSN == 0 selects cyclic hopping, any other value pseudo-random hopping.
    """
    n = _check("n", n, MAX_N, lower=1)
    maio = _check("maio", maio)
    hsn = _check("hsn", hsn)
    t1, t2, t3 = _counters(t1, t2, t3)

    if hsn == 0:
        return (_fn(t1, t2, t3) + maio) % n

    # how many bits do we need to encode N?
    nbin = n.bit_length()
    modulo_nbin = 2 << nbin

    m = (t2 + RNTABLE[rntable_index(t1, t3, hsn)]) % modulo_nbin
    if m < n:
        s = m
    else:
        s = (m + t3 % modulo_nbin) % n
    return (maio + s) % n
