#!/usr/bin/env python3
"""
Run all example scripts and generate a summary report.

This script executes all example scripts in sequence and reports results.
"""

import sys
import os
import subprocess
import time

# The parent directory is added to the path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

EXAMPLES = [
    ("example_1_basic_chain.py", "Basic Markov chain and model mixing"),
    ("example_world_forecast.py", "World forecast ensemble"),
]


def run_example(script_name, description):
    """Run an example script and return success status."""
    print(f"\n{'=' * 70}")
    print(f"Running: {description}")
    print(f"Script: {script_name}")
    print('=' * 70)

    script_path = os.path.join(os.path.dirname(__file__), script_name)
    start_time = time.time()

    try:
        result = subprocess.run(
            [sys.executable, script_path],
            cwd=os.path.dirname(os.path.dirname(script_path)),
            env={**os.environ, 'PYTHONPATH': '.'},
            capture_output=True,
            text=True,
            timeout=300  # 5 minute timeout
        )
    except subprocess.TimeoutExpired:
        elapsed = time.time() - start_time
        print(f"Timeout (>{elapsed:.2f}s)")
        return False, elapsed

    elapsed = time.time() - start_time
    if result.returncode == 0:
        print(f"Success ({elapsed:.2f}s)")
        lines = result.stdout.strip().split('\n') if result.stdout else []
        for line in lines[-5:]:
            if line.strip():
                print(f"  {line}")
        return True, elapsed

    print(f"Failed ({elapsed:.2f}s)")
    if result.stderr:
        print("Error output:")
        for line in result.stderr.strip().split('\n')[-10:]:
            print(f"  {line}")
    return False, elapsed


def main():
    results = [(name, *run_example(name, desc)) for name, desc in EXAMPLES]

    print(f"\n{'=' * 70}")
    print("Summary")
    print('=' * 70)
    for name, ok, elapsed in results:
        status = "OK  " if ok else "FAIL"
        print(f"  [{status}] {name} ({elapsed:.2f}s)")

    return 0 if all(ok for _, ok, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
