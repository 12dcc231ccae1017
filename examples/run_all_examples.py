#!/usr/bin/env python3
"""
Run all example scripts and report which ones succeed.
"""

import os
import subprocess
import sys
import time

EXAMPLES = [
    ("example_coins_and_dice.py", "Example: Coins and Dice"),
    ("example_monty_hall.py", "Example: Monty Hall"),
]


def run_example(script_name, description):
    """Run an example script and return (success, elapsed, error)."""
    print(f"\n{'=' * 70}")
    print(f"Running: {description}")
    print("=" * 70)

    script_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), script_name)
    start_time = time.time()
    result = subprocess.run(
        [sys.executable, script_path],
        cwd=os.path.dirname(os.path.dirname(script_path)),
        capture_output=True,
        text=True,
        timeout=300,
    )
    elapsed = time.time() - start_time

    if result.returncode == 0:
        print(f"Success ({elapsed:.2f}s)")
        for line in result.stdout.strip().split("\n")[-5:]:
            if line.strip():
                print(f"  {line}")
        return True, elapsed, None

    print(f"Failed ({elapsed:.2f}s)")
    for line in result.stderr.strip().split("\n")[-10:]:
        print(f"  {line}")
    return False, elapsed, result.stderr


def main():
    results = [(desc, *run_example(script, desc)) for script, desc in EXAMPLES]

    print("\n" + "=" * 70)
    print("Execution Summary")
    print("=" * 70)
    for description, success, elapsed, _error in results:
        status = "Pass" if success else "Fail"
        print(f"{status:8} {description:45} ({elapsed:6.2f}s)")

    passed = sum(1 for _d, success, _e, _err in results if success)
    print("-" * 70)
    print(f"Total: {passed}/{len(results)} examples passed")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
