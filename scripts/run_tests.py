#!/usr/bin/env python3
"""Test runner script for the Negative Test Calculator."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# One entry per tests/test_<module>.py
TEST_MODULES = (
    "app",
    "chart",
    "const",
    "coordinator",
    "probability",
    "run_tests",
    "schema",
    "utils",
)
COVERED_PACKAGES = ("negative_test", "calculator")
COVERAGE_THRESHOLD = 85


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and return its exit code."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, cwd=PROJECT_ROOT)
    return result.returncode


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Run tests for the Negative Test Calculator")
    parser.add_argument(
        "--no-cov",
        action="store_true",
        help="Run tests without coverage analysis"
    )
    parser.add_argument(
        "--module",
        nargs="+",
        choices=TEST_MODULES,
        metavar="MODULE",
        help=f"Run tests for specific modules ({', '.join(TEST_MODULES)})"
    )
    parser.add_argument(
        "-k",
        "--keyword",
        help="Only run tests matching the pytest keyword expression"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def build_command(args: argparse.Namespace) -> list[str]:
    """Build the pytest command line for the parsed arguments."""
    cmd = [sys.executable, "-m", "pytest"]

    # Coverage only makes sense for the full suite
    if not args.no_cov:
        cmd.extend(f"--cov={package}" for package in COVERED_PACKAGES)
        cmd.extend([
            "--cov-report=term-missing:skip-covered",
            "--cov-report=xml:coverage.xml",
            "--cov-report=html:htmlcov",
        ])
        if not args.module and not args.keyword:
            cmd.append(f"--cov-fail-under={COVERAGE_THRESHOLD}")

    cmd.append("-vv" if args.verbose else "-v")

    if args.debug:
        cmd.append("--log-cli-level=DEBUG")

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    if args.module:
        cmd.extend(f"tests/test_{module}.py" for module in args.module)
    else:
        cmd.append("tests/")

    return cmd


def main(argv: list[str] | None = None) -> int:
    """Main test runner function."""
    args = build_parser().parse_args(argv)
    exit_code = run_command(build_command(args), "Negative Test Calculator Tests")

    if exit_code == 0:
        print(f"\n{'='*60}")
        print("All tests passed!")
        if not args.no_cov:
            print("Coverage report generated:")
            print("   - Terminal: shown above")
            print("   - XML: coverage.xml")
            print("   - HTML: htmlcov/index.html")
        print(f"{'='*60}")
    else:
        print(f"\n{'='*60}")
        print("Some tests failed!")
        print(f"Exit code: {exit_code}")
        print(f"{'='*60}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
