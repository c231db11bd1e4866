"""The walkthrough script runs end to end and prints the known answers."""

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_demo_runs():
    r = subprocess.run(
        [sys.executable, str(REPO_ROOT / "demo_church.py")],
        cwd=str(REPO_ROOT),
        capture_output=True,
        text=True,
    )
    assert r.returncode == 0, r.stderr
    out = r.stdout
    for line in (
        "true & false: False",
        "0--: 0",
        "6-7: 0",
        "10^2: 100",
        "FAC(5): 120",
        "MAP(DOUBLE): [6, 4, 2]",
        '"Hello "+"world": Hello world',
        '"foo"=="bar": False',
        "dog years: 21 35",
        "0+1+...+5 (WHILE): 15",
        "1*2*...*5 (FOR): 120",
    ):
        assert line in out
