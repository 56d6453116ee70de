#!/usr/bin/env python3
"""Run the unirand and unirand_cmp test suites under coverage.

Usage (from the repository root):
    python scripts/coverage_py.py            # terminal summary
    python scripts/coverage_py.py --html     # also write coverage_py/html/
"""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_FILE = ROOT_DIR / "coverage_py" / ".coverage"
PACKAGES = ("unirand", "unirand_cmp")


def coverage(command: str, *args: str) -> int:
    cmd = [
        sys.executable,
        "-m",
        "coverage",
        command,
        f"--data-file={DATA_FILE}",
        *args,
    ]
    return subprocess.run(cmd, cwd=ROOT_DIR).returncode


def main() -> int:
    parser = argparse.ArgumentParser(description="Unit tests with coverage")
    parser.add_argument(
        "--html", action="store_true", help="Also write an HTML report"
    )
    args = parser.parse_args()

    DATA_FILE.parent.mkdir(parents=True, exist_ok=True)
    rc = coverage(
        "run", f"--source={','.join(PACKAGES)}", "-m", "pytest", *PACKAGES
    )
    if rc != 0:
        return rc
    rc = coverage("report")
    if rc == 0 and args.html:
        html_dir = DATA_FILE.parent / "html"
        rc = coverage("html", f"--directory={html_dir}")
        print(f"HTML report: {html_dir / 'index.html'}")
    return rc


if __name__ == "__main__":
    sys.exit(main())
