"""Tests documenting the float representation of balances.

Balances are plain floats, so fractional amounts can drift. These tests
pin that behavior down rather than hiding it behind rounding.
"""

import pytest

from bank_account.models.account import Account


def test_fractional_deposits_drift():
    """0.1 + 0.2 is not exactly 0.3 in binary floating point."""
    account = Account()
    account.deposit(0.1)
    account.deposit(0.2)

    assert account.balance != 0.3
    assert account.balance == 0.30000000000000004
    assert account.balance == pytest.approx(0.3)


def test_drift_can_reject_a_withdrawal_of_the_nominal_balance():
    """Ten deposits of 0.1 leave slightly less than 1.0 in the account."""
    account = Account()
    for _ in range(10):
        account.deposit(0.1)

    assert account.balance < 1.0
    assert account.withdraw(1.0) is False
    assert account.withdraw(account.balance) is True
    assert account.balance == 0


def test_whole_amounts_are_exact():
    """Integral amounts well inside float precision stay exact."""
    account = Account()
    for _ in range(1000):
        account.deposit(1)
    for _ in range(400):
        account.withdraw(1)

    assert account.balance == 600
