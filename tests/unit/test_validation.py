"""
Unit tests for creation-time validation of trade and cash input.
"""

import pytest
from decimal import Decimal

from portfolio_tracker.core.exceptions import (
    ValidationError,
    MissingFieldError,
    NotANumberError,
    InvalidAmountError,
)
from portfolio_tracker.domain.models import CashTransactionType
from portfolio_tracker.services.validation import (
    validate_trade_input,
    validate_cash_input,
    build_cash_transaction,
)


class TestValidateTradeInput:
    """Tests for validate_trade_input."""

    def test_normalizes_ticker_and_parses_numbers(self):
        """
        GIVEN a lowercase padded ticker and string numbers
        WHEN I validate
        THEN the Transaction has an uppercase ticker and Decimal amounts
        """
        txn = validate_trade_input("  aapl ", "2024-06-14", "10", "185.50")

        assert txn.ticker == "AAPL"
        assert txn.date == "2024-06-14"
        assert txn.shares == Decimal("10")
        assert txn.price == Decimal("185.50")
        assert txn.txn_id

    def test_negative_shares_is_a_sale(self):
        txn = validate_trade_input("MSFT", "2024-06-14", "-3", 300)

        assert txn.shares == Decimal("-3")

    def test_each_trade_gets_its_own_id(self):
        a = validate_trade_input("AAPL", "2024-06-14", "1", "1")
        b = validate_trade_input("AAPL", "2024-06-14", "1", "1")

        assert a.txn_id != b.txn_id

    @pytest.mark.parametrize(
        "ticker,date,shares,price,field",
        [
            ("", "2024-06-14", "1", "1", "ticker"),
            ("AAPL", None, "1", "1", "date"),
            ("AAPL", "2024-06-14", "  ", "1", "shares"),
            ("AAPL", "2024-06-14", "1", None, "price"),
        ],
    )
    def test_missing_field(self, ticker, date, shares, price, field):
        """
        GIVEN one empty field
        WHEN I validate
        THEN MissingFieldError names that field
        """
        with pytest.raises(MissingFieldError) as exc_info:
            validate_trade_input(ticker, date, shares, price)

        assert exc_info.value.field == field
        assert exc_info.value.code == "MISSING_FIELD"

    @pytest.mark.parametrize("shares,price", [("abc", "1"), ("1", "1.2.3"), ("inf", "1"), ("1", "NaN")])
    def test_not_a_number(self, shares, price):
        """
        GIVEN shares or price that is not a finite number
        WHEN I validate
        THEN NotANumberError is raised
        """
        with pytest.raises(NotANumberError):
            validate_trade_input("AAPL", "2024-06-14", shares, price)

    def test_zero_shares_rejected(self):
        with pytest.raises(InvalidAmountError):
            validate_trade_input("AAPL", "2024-06-14", "0", "100")

    def test_no_magnitude_bounds(self):
        """
        GIVEN a huge share count
        WHEN I validate
        THEN it is accepted
        """
        txn = validate_trade_input("AAPL", "2024-06-14", "1e12", "0")

        assert txn.shares == Decimal("1e12")
        assert txn.price == Decimal("0")


class TestValidateCashInput:
    """Tests for validate_cash_input and build_cash_transaction."""

    def test_positive_amount(self):
        assert validate_cash_input("250.75") == Decimal("250.75")

    def test_missing_amount(self):
        with pytest.raises(MissingFieldError):
            validate_cash_input("")

    @pytest.mark.parametrize("amount", ["0", "-5", "abc", "Infinity"])
    def test_invalid_amount(self, amount):
        """
        GIVEN a zero, negative or non-numeric amount
        WHEN I validate
        THEN InvalidAmountError is raised
        """
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_cash_input(amount)

        assert exc_info.value.code == "INVALID_AMOUNT"

    def test_withdrawal_is_negative(self):
        """
        GIVEN a magnitude of 100 and the WITHDRAWAL selector
        WHEN I build the cash transaction
        THEN the stored amount is -100
        """
        cash = build_cash_transaction("100", CashTransactionType.WITHDRAWAL, "2024-06-14")

        assert cash.amount == Decimal("-100")
        assert cash.type == CashTransactionType.WITHDRAWAL
        assert cash.date == "2024-06-14"

    def test_deposit_from_string_type(self):
        cash = build_cash_transaction("100", "DEPOSIT", "2024-06-14")

        assert cash.amount == Decimal("100")
        assert cash.type == CashTransactionType.DEPOSIT

    def test_date_defaults_to_today(self):
        cash = build_cash_transaction("10", CashTransactionType.DEPOSIT)

        assert len(cash.date) == 10
        assert cash.date[4] == "-"

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            build_cash_transaction("10", "TRANSFER")
