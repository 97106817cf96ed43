"""Custom exceptions for the bank account model."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InvalidArgumentError(BankError, ValueError):
    """Raised when a caller breaks an operation's input contract."""
    pass


class InvalidAmountError(InvalidArgumentError):
    """Raised when an invalid amount is provided (e.g., negative amount)."""
    pass


class InvalidTransferError(InvalidArgumentError):
    """Raised when a transfer has no valid destination account."""
    pass
