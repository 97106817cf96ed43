"""Data models for the bank account."""

from .account import Account
from .exceptions import (
    BankError,
    InvalidArgumentError,
    InvalidAmountError,
    InvalidTransferError,
)

__all__ = [
    "Account",
    "BankError",
    "InvalidArgumentError",
    "InvalidAmountError",
    "InvalidTransferError",
]
