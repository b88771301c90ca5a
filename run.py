#!/usr/bin/env python3
"""
Card Accounts Demo Entry Point

Opens a debit and a credit account, replays a short sequence of deposits
and withdrawals, and prints each account's transaction history.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from card_accounts.accounts import open_debit_account, open_credit_account
from card_accounts.config import get_config
from card_accounts.logging_config import setup_logging
from card_accounts.reporting import account_summary, render_history


def print_history(title, account):
    print(f"\n{title}")
    for line in render_history(account):
        print(line)
    summary = account_summary(account)
    print(f"Deposited: {summary['total_deposited']}, withdrawn: {summary['total_withdrawn']}")


def main():
    settings = get_config()
    setup_logging(settings.log_level, log_format=settings.log_format)

    debit_account = open_debit_account("Jose Carlos")
    credit_account = open_credit_account("James Bond", settings.default_credit_limit)

    print("Debit account operations:")
    print(f"Card holder: {debit_account.owner}")
    debit_account.deposit(5000)
    debit_account.withdraw(2000)
    debit_account.withdraw(4000)

    print_history("Debit account history:", debit_account)

    print("\nCredit account operations:")
    print(f"Card holder: {credit_account.owner}")
    credit_account.withdraw(5000)
    credit_account.deposit(2000)
    credit_account.withdraw(7000)
    credit_account.deposit(10000)

    print_history("Credit account history:", credit_account)


if __name__ == "__main__":
    main()
