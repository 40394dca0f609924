#!/usr/bin/env python
"""
Lint fiddlebisect and run its unit tests.

    python check.py           # flake8, then pytest
    python check.py --cover   # same, tests run under coverage
"""

import argparse
import os
import sys
from subprocess import call

HERE = os.path.dirname(os.path.abspath(__file__))

LINT_CMD = ["flake8", "fiddlebisect", "tests", "setup.py", "check.py"]


def test_cmd(cover):
    if cover:
        return ["coverage", "run", "--source=fiddlebisect", "-m", "pytest"]
    return [sys.executable, "-m", "pytest"]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--cover", action="store_true", help="measure test coverage")
    options = parser.parse_args(argv)

    for cmd in (LINT_CMD, test_cmd(options.cover)):
        print("Running: %s" % " ".join(cmd))
        retcode = call(cmd, cwd=HERE)
        if retcode:
            return retcode
    if options.cover:
        return call(["coverage", "report"], cwd=HERE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
