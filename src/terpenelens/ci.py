"""Local CI runner that mirrors the GitHub Actions workflow."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

PACKAGE = "terpenelens"


def _run(command: list[str], cwd: Path) -> None:
    subprocess.run(command, check=True, cwd=cwd)


def build_steps(python: str, skip_install: bool = False, skip_lint: bool = False) -> list[list[str]]:
    """Commands run by the CI job, in order."""
    steps: list[list[str]] = []
    if not skip_install:
        steps.append([python, "-m", "pip", "install", "--upgrade", "pip"])
        steps.append([python, "-m", "pip", "install", "-e", ".[dev]"])
    if not skip_lint:
        steps.append([python, "-m", "ruff", "check", "src", "tests"])
        steps.append([python, "-m", "black", "--check", "src", "tests"])
        steps.append([python, "-m", "mypy", "src"])
    steps.append(
        [
            python,
            "-m",
            "pytest",
            f"--cov=src/{PACKAGE}",
            "--cov-report=term-missing",
            "--cov-report=xml",
        ]
    )
    return steps


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog=f"{PACKAGE}-ci")
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Skip pip install steps (useful if deps already installed).",
    )
    parser.add_argument(
        "--skip-lint",
        action="store_true",
        help="Only run the test suite.",
    )
    args = parser.parse_args(argv)

    cwd = Path.cwd()
    for command in build_steps(sys.executable, args.skip_install, args.skip_lint):
        _run(command, cwd)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
