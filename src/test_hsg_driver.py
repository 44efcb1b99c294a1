#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# GSM HSG - Brute-Force Driver Test Script

import io
import os
import sys
import tempfile
import contextlib
import numpy as np
import yaml

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from hsg_driver import main, format_vector
from hsg_vectors import VECTOR_DTYPE
from mobile_allocation import MobileAllocation, MA_TEST


def run_driver(argv, config_dict=None):
    """Runs the driver with an optional temporary config.yaml, returns (code, stdout lines)."""
    out = io.StringIO()
    with tempfile.TemporaryDirectory() as tmp:
        if config_dict is not None:
            config_path = os.path.join(tmp, "config.yaml")
            with open(config_path, 'w') as f:
                yaml.dump(config_dict, f)
            argv = ["--config", config_path] + argv
        with contextlib.redirect_stdout(out):
            code = main(argv)
    return code, out.getvalue().splitlines()


def test_default_check():
    code, lines = run_driver(["--check"])
    assert code == 0
    assert "Vectors: 509184" in lines[0]
    assert "Out of table: 91260" in lines[0]
    assert "Failures: 0" in lines[0]
    assert lines[1] == "Consistency check: SUCCESS"


def test_default_listing():
    code, lines = run_driver(["--limit", "2"])
    assert code == 0
    # RNTABLE[51] = 19, 19 mod 16 = 3
    assert lines == [
        "HSN: 51\tT1: 0\tT2: 0\tT3: 0\tMAIO: 0\tMAI: 3\tMA[MAI]: 850",
        "HSN: 51\tT1: 0\tT2: 0\tT3: 0\tMAIO: 1\tMAI: 4\tMA[MAI]: 857",
    ]


def test_config_file():
    cfg = {'hopping': {'hsn': 0}, 'mobile_allocation': {'arfcns': [10, 20, 30]}}
    code, lines = run_driver(["--limit", "4"], cfg)
    assert code == 0
    assert [l.split("\t")[-2:] for l in lines] == [
        ["MAI: 0", "MA[MAI]: 10"],
        ["MAI: 1", "MA[MAI]: 20"],
        ["MAI: 2", "MA[MAI]: 30"],
        ["MAI: 1", "MA[MAI]: 20"],
    ]


def test_hsn_override():
    cfg = {'hopping': {'hsn': 51}}
    code, lines = run_driver(["--hsn", "0", "--limit", "1"], cfg)
    assert code == 0
    assert lines[0].startswith("HSN: 0\t")


def test_config_errors():
    code, lines = run_driver(["--check"], {'mobile_allocation': {'arfcns': []}})
    assert code == 2
    assert lines[0].startswith("[HSG] Config error:")

    code, lines = run_driver(["--check", "--hsn", "64"])
    assert code == 2

    code, lines = run_driver(["--config", "/nonexistent/config.yaml", "--check"])
    assert code == 2

    code, lines = run_driver(["--check"], [1, 2, 3])
    assert code == 2

    code, lines = run_driver(["--check"], {'mobile_allocation': [813, 820]})
    assert code == 2
    assert lines[0].startswith("[HSG] Config error:")

    code, lines = run_driver(["--check"], {'hopping': [51]})
    assert code == 2

    # YAML true loads as a bool, not HSN 1
    code, lines = run_driver(["--check"], {'hopping': {'hsn': True}})
    assert code == 2

    code, lines = run_driver(["--limit", "-5"])
    assert code == 2
    assert lines == ["[HSG] Config error: --limit -5 is negative"]


def test_format_vector_error_line():
    row = np.zeros(1, dtype=VECTOR_DTYPE)[0]
    row['in_table'] = True
    row['mai'] = 9
    assert format_vector(51, row, MobileAllocation(MA_TEST)) == "Error: MAI - consistency check failed."


def test_format_vector_out_of_table():
    row = np.zeros(1, dtype=VECTOR_DTYPE)[0]
    row['t1'], row['t3'], row['mai'] = 14, 50, -1
    assert format_vector(51, row, MobileAllocation(MA_TEST)) == \
        "HSN: 51\tT1: 14\tT2: 0\tT3: 50\tMAIO: 0\tMAI: -\tRNTABLE index out of range"


if __name__ == "__main__":
    tests = [test_default_check, test_default_listing, test_config_file,
             test_hsn_override, test_config_errors, test_format_vector_error_line,
             test_format_vector_out_of_table]
    ok = True
    for t in tests:
        try:
            t()
            print(f"{t.__name__}: SUCCESS")
        except Exception as e:
            print(f"{t.__name__}: FAILURE {e!r}")
            ok = False
    sys.exit(0 if ok else 1)
