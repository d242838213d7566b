#!/usr/bin/env python3
"""Allow running as ``python -m synthlang``."""

import sys

from synthlang.cli import main

if __name__ == '__main__':
    sys.exit(main())
