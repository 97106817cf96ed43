"""Account data model."""

import logging
import math
from dataclasses import dataclass, field
from numbers import Real

from bank_account.models.exceptions import InvalidAmountError, InvalidTransferError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Account:
    """Represents a bank account holding a non-negative balance.

    The balance is only changed through deposit, withdraw and transfer.
    Amounts are accumulated as floats, so repeated fractional operations
    can drift by a few ulps.

    Not thread-safe: callers sharing an account across threads must
    serialize access themselves.
    """

    _balance: float = field(default=0.0, init=False)

    @property
    def balance(self) -> float:
        """Current balance of the account."""
        return self._balance

    def _check_amount(self, amount: float, action: str) -> None:
        """
        Validate an amount before any balance change.

        Args:
            amount: The amount passed to the operation
            action: Operation name used in the error message

        Raises:
            InvalidAmountError: If the amount is not a finite real number or is negative
        """
        if isinstance(amount, bool) or not isinstance(amount, Real):
            logger.warning("Rejected %s of non-numeric amount %r", action, amount)
            raise InvalidAmountError(f"Amount to {action} must be a number, got {amount!r}")
        try:
            finite = math.isfinite(amount)
        except OverflowError:
            finite = False
        if not finite:
            logger.warning("Rejected %s of non-finite amount %s", action, amount)
            raise InvalidAmountError(f"Amount to {action} must be a finite number, got {amount}")
        if amount < 0:
            logger.warning("Rejected %s of negative amount %s", action, amount)
            raise InvalidAmountError(f"Amount to {action} cannot be negative")

    def _check_fits(self, amount: float, action: str) -> None:
        """Reject an amount that would overflow this account's balance."""
        if not math.isfinite(self._balance + amount):
            logger.warning("Rejected %s of %s, balance would overflow", action, amount)
            raise InvalidAmountError(f"Amount to {action} would overflow the balance")

    def deposit(self, amount: float) -> None:
        """
        Add an amount to the balance.

        Args:
            amount: The amount to deposit, must not be negative

        Raises:
            InvalidAmountError: If the amount is negative, not a finite number,
                or would overflow the balance
        """
        self._check_amount(amount, "deposit")
        self._check_fits(amount, "deposit")
        self._balance += amount
        logger.debug("Deposited %s, balance is now %s", amount, self._balance)

    def withdraw(self, amount: float) -> bool:
        """
        Take an amount out of the balance if funds are sufficient.

        Args:
            amount: The amount to withdraw, must not be negative

        Returns:
            True if the withdrawal happened, False on insufficient funds

        Raises:
            InvalidAmountError: If the amount is negative or not a finite number
        """
        self._check_amount(amount, "withdraw")
        if self._balance >= amount:
            self._balance -= amount
            logger.debug("Withdrew %s, balance is now %s", amount, self._balance)
            return True
        logger.info("Withdrawal of %s rejected, balance is %s", amount, self._balance)
        return False

    def transfer(self, destination: "Account", amount: float) -> bool:
        """
        Move an amount from this account into another one.

        The transfer is a withdraw on this account followed by a deposit
        into the destination. Transferring to the same account is allowed
        and leaves the balance where it was.

        Args:
            destination: The account receiving the funds
            amount: The amount to transfer, must not be negative

        Returns:
            True if the funds moved, False on insufficient funds

        Raises:
            InvalidTransferError: If destination is None or not an Account
            InvalidAmountError: If the amount is negative, not a finite number,
                or would overflow the destination balance
        """
        if destination is None:
            logger.warning("Rejected transfer without a destination account")
            raise InvalidTransferError("Destination account cannot be None")
        if not isinstance(destination, Account):
            logger.warning("Rejected transfer to non-account %r", destination)
            raise InvalidTransferError(
                f"Destination must be an Account, got {type(destination).__name__}"
            )
        self._check_amount(amount, "transfer")
        if destination is not self:
            destination._check_fits(amount, "transfer")

        if not self.withdraw(amount):
            logger.debug("Transfer of %s rejected for insufficient funds", amount)
            return False

        destination.deposit(amount)
        logger.debug("Transferred %s", amount)
        return True
