"""Creation-time validation for trade and cash input."""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from portfolio_tracker.core.exceptions import (
    ValidationError,
    MissingFieldError,
    NotANumberError,
    InvalidAmountError,
)
from portfolio_tracker.core.timezone import today_eastern_iso
from portfolio_tracker.domain.models import (
    Transaction,
    CashTransaction,
    CashTransactionType,
    new_txn_id,
)

RawNumber = Union[str, int, float, Decimal, None]


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_finite(field: str, value: RawNumber) -> Decimal:
    """Parse a form value into a finite Decimal or raise NotANumberError."""
    if isinstance(value, bool):
        raise NotANumberError(field, value)
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise NotANumberError(field, value)
    if not number.is_finite():
        raise NotANumberError(field, value)
    return number


def validate_trade_input(
    ticker: Optional[str],
    date: Optional[str],
    shares: RawNumber,
    price: RawNumber,
) -> Transaction:
    """
    Validate the add-transaction form and build a Transaction.

    Raises MissingFieldError for empty fields, NotANumberError when shares
    or price is not a finite number, InvalidAmountError for zero shares.
    No other bounds are enforced.
    """
    for field, value in (("ticker", ticker), ("date", date), ("shares", shares), ("price", price)):
        if _is_blank(value):
            raise MissingFieldError(field)

    parsed_shares = _parse_finite("shares", shares)
    parsed_price = _parse_finite("price", price)
    if parsed_shares == 0:
        raise InvalidAmountError("shares", "must be nonzero")

    return Transaction(
        ticker=ticker.strip().upper(),
        date=date.strip(),
        shares=parsed_shares,
        price=parsed_price,
        txn_id=new_txn_id(),
    )


def validate_cash_input(amount: RawNumber) -> Decimal:
    """Validate a cash amount: required, finite and strictly positive."""
    if _is_blank(amount):
        raise MissingFieldError("amount")
    try:
        value = _parse_finite("amount", amount)
    except NotANumberError:
        raise InvalidAmountError("amount", "must be a positive number")
    if value <= 0:
        raise InvalidAmountError("amount", "must be a positive number")
    return value


def build_cash_transaction(
    amount: RawNumber,
    txn_type: Union[CashTransactionType, str],
    date: Optional[str] = None,
) -> CashTransaction:
    """Validate the magnitude and apply the sign from the deposit/withdrawal selector."""
    magnitude = validate_cash_input(amount)
    try:
        txn_type = CashTransactionType(txn_type)
    except ValueError:
        raise ValidationError(f"Unknown cash transaction type: {txn_type}")
    signed = -magnitude if txn_type == CashTransactionType.WITHDRAWAL else magnitude
    return CashTransaction(
        date=date.strip() if not _is_blank(date) else today_eastern_iso(),
        amount=signed,
        type=txn_type,
    )
