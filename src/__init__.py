"""
Expense Tracker - Source Package

A personal expense tracker for the command line. Expenses live in a
single local JSON file that is read and rewritten in full by every command.

DESIGN PRINCIPLES:
1. Fail early, fail visibly
2. No silent corrections
3. Every change to the store is audited
4. Storage location and time are injected, never global
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
