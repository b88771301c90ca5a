"""
Account Management Module

Debit and credit card accounts. A single Account type carries the shared
fields and a kind tag; deposit/withdraw rules live in one policy per kind.

Business rejections (invalid amount, insufficient funds, credit limit
exceeded) never raise: they come back as an OperationResult and leave the
account untouched.
"""

from decimal import Decimal
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any
from enum import Enum
from abc import ABC, abstractmethod
import threading

from .amounts import AmountLike, ZERO, to_amount, is_positive_amount, format_amount
from .config import get_config
from .identifiers import IdentifierSource, get_default_source
from .ledger import Transaction, TransactionKind, TransactionLedger
from .logging_config import get_logger, log_action


logger = get_logger("card_accounts.accounts")


class AccountKind(Enum):
    """Account variants"""
    DEBIT = "debit"    # Spends own funds only
    CREDIT = "credit"  # Spends own funds, then draws on a credit line


class OperationStatus(Enum):
    """Outcome of a deposit or withdrawal"""
    APPLIED = "applied"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass(frozen=True)
class OperationResult:
    """
    Result of a state-changing operation.
    Truthy iff the operation was applied; `transactions` holds the ledger
    entries recorded by this call, in ledger order.
    """
    status: OperationStatus
    message: str
    transactions: Tuple[Transaction, ...] = ()

    @property
    def applied(self) -> bool:
        return self.status == OperationStatus.APPLIED

    def __bool__(self) -> bool:
        return self.applied


@dataclass
class Account:
    """
    Card account. credit_limit and debt are set for CREDIT accounts only.
    """
    kind: AccountKind
    owner: str
    account_number: str
    card_number: str
    balance: Decimal = ZERO
    credit_limit: Optional[Decimal] = None
    debt: Optional[Decimal] = None
    ledger: TransactionLedger = field(default_factory=TransactionLedger, repr=False, compare=False)
    _lock: Any = field(default_factory=threading.RLock, repr=False, compare=False)

    def __post_init__(self):
        if not self.owner or not self.owner.strip():
            raise ValueError("Account owner must be a non-empty string")

        if self.balance < ZERO:
            raise ValueError("Balance cannot be negative")

        if self.kind == AccountKind.CREDIT:
            if self.credit_limit is None:
                raise ValueError("Credit accounts require a credit limit")
            if not self.credit_limit.is_finite() or self.credit_limit < ZERO:
                raise ValueError("Credit limit must be a non-negative amount")
            if self.debt is None:
                self.debt = ZERO
            if self.debt < ZERO or self.debt > self.credit_limit:
                raise ValueError("Debt must be between zero and the credit limit")
        elif self.credit_limit is not None or self.debt is not None:
            raise ValueError("Debit accounts cannot carry a credit limit or debt")

    @property
    def is_credit(self) -> bool:
        """Check if this is a credit account"""
        return self.kind == AccountKind.CREDIT

    @property
    def is_debit(self) -> bool:
        """Check if this is a debit account"""
        return self.kind == AccountKind.DEBIT

    @property
    def available_funds(self) -> Decimal:
        """Largest single withdrawal currently permitted"""
        if self.is_credit:
            return self.balance + self.credit_limit - self.debt
        return self.balance

    def deposit(self, amount: AmountLike) -> OperationResult:
        """Deposit funds; credit accounts repay debt first"""
        return self._apply(TransactionKind.DEPOSIT, amount)

    def withdraw(self, amount: AmountLike) -> OperationResult:
        """Withdraw funds; the result is truthy iff the withdrawal went through"""
        return self._apply(TransactionKind.WITHDRAW, amount)

    def get_transaction_history(self) -> List[Transaction]:
        """Snapshot of the ledger in chronological order"""
        return self.ledger.history()

    def _apply(self, kind: TransactionKind, amount: AmountLike) -> OperationResult:
        value = to_amount(amount)
        policy = _POLICIES[self.kind]

        with self._lock:
            if not is_positive_amount(value):
                result = OperationResult(OperationStatus.INVALID_AMOUNT, _invalid_amount_message(kind))
            elif kind == TransactionKind.DEPOSIT:
                result = policy.deposit(self, value)
            else:
                result = policy.withdraw(self, value)

        log_action(
            logger,
            "info" if result.applied else "warning",
            result.message,
            action=kind.value,
            resource=self.account_number,
            extra={"status": result.status.value, "amount": str(value)}
        )
        return result


class AccountPolicy(ABC):
    """Deposit/withdraw rules for one account kind. Amounts arrive validated as positive."""

    @abstractmethod
    def deposit(self, account: Account, amount: Decimal) -> OperationResult:
        pass

    @abstractmethod
    def withdraw(self, account: Account, amount: Decimal) -> OperationResult:
        pass


class DebitPolicy(AccountPolicy):
    """Balance may never go below zero"""

    def deposit(self, account: Account, amount: Decimal) -> OperationResult:
        balance = account.balance + amount
        message = (
            f"Deposited {_money(amount)} to account {account.account_number}. "
            f"Balance: {_money(balance)}"
        )

        account.balance = balance
        entry = account.ledger.record(TransactionKind.DEPOSIT, amount, balance)
        return OperationResult(OperationStatus.APPLIED, message, (entry,))

    def withdraw(self, account: Account, amount: Decimal) -> OperationResult:
        if amount > account.balance:
            return OperationResult(
                OperationStatus.INSUFFICIENT_FUNDS,
                f"Insufficient funds on account {account.account_number}"
            )

        balance = account.balance - amount
        message = (
            f"Withdrew {_money(amount)} from account {account.account_number}. "
            f"Remaining balance: {_money(balance)}"
        )

        account.balance = balance
        entry = account.ledger.record(TransactionKind.WITHDRAW, amount, balance)
        return OperationResult(OperationStatus.APPLIED, message, (entry,))


class CreditPolicy(AccountPolicy):
    """
    Withdrawals deplete the balance before drawing on the credit line.
    Deposits repay debt before adding to the balance, recording the two
    parts as separate ledger entries.

    New balance and debt are worked out and the message built before the
    account is touched.
    """

    def deposit(self, account: Account, amount: Decimal) -> OperationResult:
        repaid = min(amount, account.debt)
        remaining = amount - repaid
        debt = account.debt - repaid
        balance = account.balance + remaining
        message = (
            f"Deposit to account {account.account_number}. "
            f"Balance: {_money(balance)}, debt: {_money(debt)}"
        )

        entries = []
        account.debt = debt
        if repaid > ZERO:
            entries.append(account.ledger.record(TransactionKind.DEPOSIT, repaid, account.balance))

        if remaining > ZERO:
            account.balance = balance
            entries.append(account.ledger.record(TransactionKind.DEPOSIT, remaining, balance))

        return OperationResult(OperationStatus.APPLIED, message, tuple(entries))

    def withdraw(self, account: Account, amount: Decimal) -> OperationResult:
        if amount > account.available_funds:
            return OperationResult(
                OperationStatus.LIMIT_EXCEEDED,
                f"Credit limit exceeded on account {account.account_number}"
            )

        if amount <= account.balance:
            balance, debt = account.balance - amount, account.debt
        else:
            balance, debt = ZERO, account.debt + (amount - account.balance)
        message = (
            f"Withdrew {_money(amount)} from account {account.account_number}. "
            f"Remaining balance: {_money(balance)}, debt: {_money(debt)}"
        )

        account.balance, account.debt = balance, debt
        entry = account.ledger.record(TransactionKind.WITHDRAW, amount, balance)
        return OperationResult(OperationStatus.APPLIED, message, (entry,))


_POLICIES: Dict[AccountKind, AccountPolicy] = {
    AccountKind.DEBIT: DebitPolicy(),
    AccountKind.CREDIT: CreditPolicy(),
}


def _money(amount: Decimal) -> str:
    return format_amount(amount, get_config().currency_symbol)


def _invalid_amount_message(kind: TransactionKind) -> str:
    if kind == TransactionKind.DEPOSIT:
        return "Deposit amount must be greater than zero."
    return "Withdrawal amount must be greater than zero."


def _new_identifiers(identifiers: Optional[IdentifierSource]) -> Tuple[str, str]:
    source = identifiers or get_default_source()
    settings = get_config()
    account_number = source.digits(settings.account_number_length)
    card_number = source.digits(settings.card_number_length)
    return account_number, card_number


def open_debit_account(owner: str, identifiers: Optional[IdentifierSource] = None) -> Account:
    """
    Open a debit account with a zero balance

    Args:
        owner: Display name of the card holder
        identifiers: Source of account/card numbers (random if not provided)

    Returns:
        New debit Account
    """
    account_number, card_number = _new_identifiers(identifiers)
    account = Account(
        kind=AccountKind.DEBIT,
        owner=owner,
        account_number=account_number,
        card_number=card_number
    )
    log_action(logger, "info", f"Opened debit account {account_number}",
               action="open", resource=account_number, extra={"owner": owner})
    return account


def open_credit_account(owner: str, credit_limit: AmountLike,
                        identifiers: Optional[IdentifierSource] = None) -> Account:
    """
    Open a credit account with a zero balance and no debt

    Args:
        owner: Display name of the card holder
        credit_limit: Fixed ceiling on debt, must be non-negative
        identifiers: Source of account/card numbers (random if not provided)

    Returns:
        New credit Account

    Raises:
        ValueError: If the credit limit is negative or not a number
    """
    limit = to_amount(credit_limit)
    account_number, card_number = _new_identifiers(identifiers)
    account = Account(
        kind=AccountKind.CREDIT,
        owner=owner,
        account_number=account_number,
        card_number=card_number,
        credit_limit=limit
    )
    log_action(logger, "info", f"Opened credit account {account_number}",
               action="open", resource=account_number,
               extra={"owner": owner, "credit_limit": str(limit)})
    return account
