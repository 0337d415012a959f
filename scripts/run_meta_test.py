#!/usr/bin/env python3
"""
Meta test for the checker.

Runs check_differences on the bundled fixture pairs:
- correct/   : no contradictions, checker must exit 0
- incorrect/ : contradictions, checker must exit 1

Runs in mock mode, and in openai mode too when OPENAI_API_KEY is set.
Exits 0 only if every case behaved as expected.
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path


DEFAULT_FIXTURES = Path(__file__).resolve().parent.parent / "check_differences" / "tests" / "fixtures"


def run_case(files, expect_contradiction: bool, mode: str) -> bool:
    print(f"checking {' and '.join(files)} (mode: {mode})")
    print(f"expected: {'contradictions' if expect_contradiction else 'no contradictions'}")

    env = {**os.environ, "LLM_MODE": mode}
    result = subprocess.run(
        [sys.executable, "-m", "check_differences", *files],
        capture_output=True,
        text=True,
        env=env,
    )

    expected_code = 1 if expect_contradiction else 0
    passed = result.returncode == expected_code

    if passed:
        print("PASS")
    else:
        print("FAIL")
        print(f"  expected exit code {expected_code}, got {result.returncode}")

    if result.stdout.strip():
        print("output:")
        print(result.stdout.strip())
    if result.stderr.strip():
        print("stderr:")
        print(result.stderr.strip())

    print("-" * 40)
    return passed


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the checker against known fixtures.")
    parser.add_argument("--fixtures", default=str(DEFAULT_FIXTURES), help="Directory with correct/ and incorrect/")
    parser.add_argument("--impl", default="calculator.js", help="Implementation file name")
    parser.add_argument("--doc", default="calculator.md", help="Documentation file name")
    args = parser.parse_args()

    root = Path(args.fixtures)
    correct = [str(root / "correct" / args.impl), str(root / "correct" / args.doc)]
    incorrect = [str(root / "incorrect" / args.impl), str(root / "incorrect" / args.doc)]

    modes = ["mock"]
    if os.environ.get("OPENAI_API_KEY"):
        modes.append("openai")
    else:
        print("OPENAI_API_KEY not set, skipping openai mode")

    results = []
    for mode in modes:
        print(f"=== {mode} mode ===")
        results.append((f"correct ({mode})", run_case(correct, False, mode)))
        results.append((f"incorrect ({mode})", run_case(incorrect, True, mode)))

    print("=== summary ===")
    for index, (name, passed) in enumerate(results, 1):
        print(f"{index}. {name}: {'PASS' if passed else 'FAIL'}")

    all_passed = all(passed for _, passed in results)
    print(f"\noverall: {'PASS' if all_passed else 'FAIL'}")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
