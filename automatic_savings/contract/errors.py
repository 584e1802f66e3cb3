"""
Contract Error Taxonomy

Four domain failures plus one infrastructure passthrough. Every error
aborts the operation before anything is written or sent.
"""

from contextlib import contextmanager
from typing import Iterator

from automatic_savings.services.bank import BalanceQueryError
from automatic_savings.services.identity import InvalidAddressError
from automatic_savings.services.storage import StorageError


class ContractError(Exception):
    """Base exception for contract operations."""
    pass


class Unauthorized(ContractError):
    """Caller is not the designated owner."""

    def __init__(self):
        super().__init__("Unauthorized")


class InvalidSavingsRate(ContractError):
    """Savings rate outside (0, 100]."""

    def __init__(self, savings_rate: int):
        self.savings_rate = savings_rate
        super().__init__("Invalid Savings Rate")


class EmptyTransfer(ContractError):
    """Inbound amount is zero."""

    def __init__(self):
        super().__init__("Empty Transfer")


class EmptyBalance(ContractError):
    """Flush attempted with nothing to send."""

    def __init__(self):
        super().__init__("Empty Balance")


class InfrastructureError(ContractError):
    """
    A collaborator failed (storage, balance query, address validation).

    The original exception is kept as __cause__ and its message is
    surfaced unchanged.
    """
    pass


INFRASTRUCTURE_ERRORS = (StorageError, BalanceQueryError, InvalidAddressError)


@contextmanager
def infrastructure_errors() -> Iterator[None]:
    """Re-raise collaborator failures as InfrastructureError."""
    try:
        yield
    except INFRASTRUCTURE_ERRORS as e:
        raise InfrastructureError(str(e)) from e
