#!/usr/bin/env python3
"""
starschedules.__main__ - Module entry point
"""

import sys

from .main import main


if __name__ == "__main__":
    sys.exit(main())
