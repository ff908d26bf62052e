"""
Smoke tests for the example scripts.

Each script is run in a subprocess from the repository root, the way
`examples/run_all_examples.py` runs them.
"""

import os
import subprocess
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.mark.parametrize(
    "script",
    ["example_1_basic_chain.py", "example_world_forecast.py"],
)
def test_example_runs(script: str) -> None:
    result = subprocess.run(
        [sys.executable, os.path.join(ROOT, "examples", script)],
        cwd=ROOT,
        capture_output=True,
        text=True,
        timeout=300,
    )
    assert result.returncode == 0, result.stderr
    assert "ok=True" in result.stdout
