"""
Transaction Ledger Module

Append-only, per-account log of completed deposits and withdrawals.
Insertion order is chronological order; entries are never edited or removed.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Any
from enum import Enum

from .amounts import ZERO


class TransactionKind(Enum):
    """Kinds of ledger entries"""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


@dataclass(frozen=True)
class Transaction:
    """
    Immutable ledger entry.
    balance_after is the account balance right after the entry was recorded;
    credit debt is not part of the snapshot.
    """
    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.amount.is_finite() or self.amount <= ZERO:
            raise ValueError("Transaction amount must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with Decimals as strings"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "kind": self.kind.value,
            "amount": str(self.amount),
            "balance_after": str(self.balance_after),
        }


class TransactionLedger:
    """Ordered transaction log owned by a single account"""

    def __init__(self):
        self._entries: List[Transaction] = []

    def record(self, kind: TransactionKind, amount: Decimal, balance_after: Decimal) -> Transaction:
        """Append a new entry and return it"""
        transaction = Transaction(kind=kind, amount=amount, balance_after=balance_after)
        self._entries.append(transaction)
        return transaction

    def history(self) -> List[Transaction]:
        """Snapshot of all entries; changes to the returned list do not touch the ledger"""
        return list(self._entries)

    def last(self) -> Optional[Transaction]:
        """Most recent entry, if any"""
        return self._entries[-1] if self._entries else None

    def totals(self) -> Dict[TransactionKind, Decimal]:
        """Sum of recorded amounts per kind"""
        totals = {kind: ZERO for kind in TransactionKind}
        for entry in self._entries:
            totals[entry.kind] += entry.amount
        return totals

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._entries))
