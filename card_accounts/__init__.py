"""
Card Accounts

Debit and credit card accounts with a per-account transaction ledger.
All monetary arithmetic uses Decimal.
"""

__version__ = "1.0.0"
