#!/usr/bin/env python3
"""
Expense Tracker launcher

Run from a checkout without installing:

    python app/main.py add --amount 1000 --description lunch
    python app/main.py list
    python app/main.py summary --month 2

The installed equivalent is the `expense-tracker` console script.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
