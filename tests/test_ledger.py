"""
Test suite for ledger module

Tests transaction records and the append-only ledger.
"""

import dataclasses

import pytest
from decimal import Decimal
from datetime import datetime

from card_accounts.ledger import Transaction, TransactionKind, TransactionLedger


class TestTransaction:
    """Test Transaction records"""
    
    def test_transaction_creation(self):
        """Test a transaction carries a UTC timestamp"""
        tx = Transaction(TransactionKind.DEPOSIT, Decimal('100'), Decimal('100'))
        
        assert tx.kind == TransactionKind.DEPOSIT
        assert tx.amount == Decimal('100')
        assert tx.balance_after == Decimal('100')
        assert isinstance(tx.timestamp, datetime)
        assert tx.timestamp.tzinfo is not None
    
    def test_transaction_is_immutable(self):
        """Test fields cannot be reassigned"""
        tx = Transaction(TransactionKind.WITHDRAW, Decimal('5'), Decimal('0'))
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = Decimal('10')
    
    @pytest.mark.parametrize("amount", [Decimal('0'), Decimal('-1'), Decimal('NaN')])
    def test_amount_must_be_positive(self, amount):
        """Test non-positive amounts cannot be recorded"""
        with pytest.raises(ValueError, match="Transaction amount must be positive"):
            Transaction(TransactionKind.DEPOSIT, amount, Decimal('0'))
    
    def test_to_dict(self):
        """Test serialization keeps Decimals exact"""
        tx = Transaction(TransactionKind.WITHDRAW, Decimal('12.345'), Decimal('0.005'))
        
        data = tx.to_dict()
        assert data["kind"] == "withdraw"
        assert data["amount"] == "12.345"
        assert data["balance_after"] == "0.005"
        assert datetime.fromisoformat(data["timestamp"]) == tx.timestamp


class TestTransactionLedger:
    """Test TransactionLedger behavior"""
    
    def setup_method(self):
        """Set up test fixtures"""
        self.ledger = TransactionLedger()
    
    def test_empty_ledger(self):
        assert len(self.ledger) == 0
        assert self.ledger.history() == []
        assert self.ledger.last() is None
    
    def test_record_preserves_order(self):
        """Test entries come back in insertion order"""
        first = self.ledger.record(TransactionKind.DEPOSIT, Decimal('100'), Decimal('100'))
        second = self.ledger.record(TransactionKind.WITHDRAW, Decimal('40'), Decimal('60'))
        
        assert self.ledger.history() == [first, second]
        assert list(self.ledger) == [first, second]
        assert self.ledger.last() is second
        assert first.timestamp <= second.timestamp
    
    def test_history_is_a_snapshot(self):
        """Test callers cannot mutate the ledger through history()"""
        self.ledger.record(TransactionKind.DEPOSIT, Decimal('100'), Decimal('100'))
        
        history = self.ledger.history()
        history.clear()
        history.append("garbage")
        
        assert len(self.ledger) == 1
        assert self.ledger.history()[0].amount == Decimal('100')
    
    def test_totals(self):
        """Test per-kind sums"""
        self.ledger.record(TransactionKind.DEPOSIT, Decimal('100'), Decimal('100'))
        self.ledger.record(TransactionKind.DEPOSIT, Decimal('50.5'), Decimal('150.5'))
        self.ledger.record(TransactionKind.WITHDRAW, Decimal('20'), Decimal('130.5'))
        
        totals = self.ledger.totals()
        assert totals[TransactionKind.DEPOSIT] == Decimal('150.5')
        assert totals[TransactionKind.WITHDRAW] == Decimal('20')
    
    def test_no_removal_api(self):
        """Test the ledger exposes no way to remove or edit entries"""
        for name in ("remove", "pop", "clear", "delete", "insert", "__setitem__", "__delitem__"):
            assert not hasattr(self.ledger, name)
