# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pandas as pd

from physics.benchmark import COLUMNS, main, run_benchmarks


def test_run_benchmarks_table():
    df = run_benchmarks(sizes=[4, 8], repeats=1)
    assert list(df.columns) == COLUMNS
    assert len(df) == 8
    assert set(df["kernel"]) == {"GJ-inverse", "det", "GE-solve", "FFT"}
    assert (df["error"] < 1e-8).all()
    assert (df["sec"] >= 0).all()


def test_main_writes_csv(tmp_path, capsys):
    path = tmp_path / "bench.csv"
    main(["--sizes", "4", "--repeats", "1", "--csv", str(path)])
    assert "GJ-inverse" in capsys.readouterr().out
    df = pd.read_csv(path)
    assert list(df.columns) == COLUMNS
    assert len(df) == 4
