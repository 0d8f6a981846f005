#!/usr/bin/env python3
"""
RPNow Admin Console.

Launcher for the interactive admin console. Run from the project root
so config/settings/*.yaml is found.

Usage:
    python cli.py --help
    python cli.py
    python cli.py --base-url http://127.0.0.1:12789 --verbose
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from rpadmin.cli.app import app

if __name__ == "__main__":
    app()
