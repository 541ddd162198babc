#!/usr/bin/env python3
"""Log Parser - Entry point"""

import sys

from logparser.cli import main

if __name__ == "__main__":
    sys.exit(main())
