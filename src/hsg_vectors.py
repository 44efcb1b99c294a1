#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Conformance Vector Generator (vectorised HSG)

import operator
import os
import sys
import numpy as np

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from hsg import (RNTABLE, InvalidInput, TableIndexError, SUPERFRAME_LEN,
                 MAX_T1, MAX_T2, MAX_T3, MAX_N)

_RNTABLE = np.array(RNTABLE, dtype=np.int64)
_RNTABLE.setflags(write=False)

VECTOR_DTYPE = np.dtype([
    ('t1', np.uint8),
    ('t2', np.uint8),
    ('t3', np.uint8),
    ('maio', np.uint16),
    ('mai', np.int16),
    ('in_table', np.bool_),
])


def _as_counter(name, values, upper=None):
    arr = np.asarray(values)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"{name} must be an integer array, got {arr.dtype}")
    arr = arr.astype(np.int64)
    if arr.size and arr.min() < 0:
        raise InvalidInput(f"{name} has negative entries")
    if upper is not None and arr.size and arr.max() > upper:
        raise InvalidInput(f"{name} has entries above {upper}")
    return arr


def hsg_array(t1, t2, t3, maio, hsn, n, fill=None):
    """
    Elementwise HSG over broadcastable integer arrays of T1, T2, T3 and MAIO.
    HSN and N are scalars. Same results and errors as hsg.hsg(), except that
    with fill set, elements whose RNTABLE index runs off the table get fill
    instead of raising TableIndexError.
    """
    n = operator.index(n)
    hsn = operator.index(hsn)
    if n < 1 or n > MAX_N:
        raise InvalidInput(f"n={n} outside [1, {MAX_N}]")
    if hsn < 0:
        raise InvalidInput(f"hsn={hsn} is below 0")

    t1, t2, t3, maio = np.broadcast_arrays(
        _as_counter("t1", t1, MAX_T1),
        _as_counter("t2", t2, MAX_T2),
        _as_counter("t3", t3, MAX_T3),
        _as_counter("maio", maio),
    )

    if hsn == 0:
        fn = 51 * np.mod(t3 - t2, 26) + t3 + SUPERFRAME_LEN * t1
        return (fn + maio) % n

    modulo_nbin = 2 << n.bit_length()
    idx = rntable_index_array(t1, t3, hsn)
    in_table = idx < len(_RNTABLE)
    if fill is None and not in_table.all():
        raise TableIndexError(f"RNTABLE index {int(idx.max())} out of range (hsn={hsn})")

    m = (t2 + _RNTABLE[np.where(in_table, idx, 0)]) % modulo_nbin
    s = np.where(m < n, m, (m + t3 % modulo_nbin) % n)
    mai = (maio + s) % n
    return mai if fill is None else np.where(in_table, mai, fill)


def rntable_index_array(t1, t3, hsn):
    """HSN xor ((T1 mod 64) + T3), elementwise and unchecked against the table size."""
    return hsn ^ ((np.asarray(t1, dtype=np.int64) % 64) + np.asarray(t3, dtype=np.int64))


def enumerate_vectors(hsn, n, maio_values=None):
    """
    Full (T1, T2, T3, MAIO) grid for one (HSN, N), T1 outermost and MAIO innermost.
    Returns a structured array with fields t1, t2, t3, maio, mai, in_table.
    Vectors whose RNTABLE index runs off the table have in_table False and mai -1.
    """
    if maio_values is None:
        maio_values = np.arange(n)
    grids = np.meshgrid(
        np.arange(MAX_T1 + 1),
        np.arange(MAX_T2 + 1),
        np.arange(MAX_T3 + 1),
        np.asarray(maio_values),
        indexing='ij',
    )
    t1, t2, t3, maio = (g.ravel() for g in grids)
    mai = hsg_array(t1, t2, t3, maio, hsn, n, fill=-1)

    vectors = np.empty(t1.size, dtype=VECTOR_DTYPE)
    vectors['t1'] = t1
    vectors['t2'] = t2
    vectors['t3'] = t3
    vectors['maio'] = maio
    vectors['mai'] = mai
    if hsn == 0:
        vectors['in_table'] = True
    else:
        vectors['in_table'] = rntable_index_array(t1, t3, hsn) < len(_RNTABLE)
    return vectors


def consistency_check(vectors, n):
    """Number of in-table vectors whose MAI falls outside [0, n)."""
    mai = vectors['mai'][vectors['in_table']]
    return int(np.count_nonzero((mai < 0) | (mai >= n)))


def out_of_table(vectors):
    """Number of vectors whose RNTABLE index runs off the table."""
    return int(np.count_nonzero(~vectors['in_table']))
