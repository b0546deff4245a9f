"""Enumerations for domain models."""

from enum import Enum


class CashTransactionType(str, Enum):
    """
    Direction selector for cash transactions.

    Display only: the sign of CashTransaction.amount is what aggregation uses.
    """

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
