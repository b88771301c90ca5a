"""
Statement Reporting Module

Text rendering of transaction history and account summaries for display.
"""

from typing import Any, Dict, List, Optional

from .accounts import Account
from .config import get_config
from .ledger import Transaction, TransactionKind


def format_transaction(transaction: Transaction, symbol: Optional[str] = None) -> str:
    """Render one ledger entry as a single line in local time"""
    if symbol is None:
        symbol = get_config().currency_symbol
    when = transaction.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"{when}: {transaction.kind.value} - {transaction.amount}{symbol} "
        f"(balance: {transaction.balance_after}{symbol})"
    )


def render_history(account: Account, symbol: Optional[str] = None) -> List[str]:
    """One line per ledger entry, oldest first"""
    return [format_transaction(tx, symbol) for tx in account.get_transaction_history()]


def account_summary(account: Account) -> Dict[str, Any]:
    """Current account state with Decimals as strings"""
    totals = account.ledger.totals()
    last = account.ledger.last()
    summary = {
        "owner": account.owner,
        "kind": account.kind.value,
        "account_number": account.account_number,
        "card_number": account.card_number,
        "balance": str(account.balance),
        "transaction_count": len(account.ledger),
        "total_deposited": str(totals[TransactionKind.DEPOSIT]),
        "total_withdrawn": str(totals[TransactionKind.WITHDRAW]),
        "last_transaction": last.to_dict() if last else None,
    }
    if account.is_credit:
        summary.update({
            "debt": str(account.debt),
            "credit_limit": str(account.credit_limit),
            "available": str(account.available_funds),
        })
    return summary
