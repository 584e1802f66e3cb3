"""
Abstract Bank Query Interface

The ledger is the authority on balances. The contract only ever reads
them, through this interface, and produces transfer instructions that
the runtime executes afterwards.
"""

from abc import ABC, abstractmethod

from automatic_savings.models.coin import Coin


class BalanceQuerierInterface(ABC):
    """Read-only view of ledger balances."""

    @abstractmethod
    def query_all_balances(self, address: str) -> list[Coin]:
        """
        Return every non-zero balance held by an address.

        Args:
            address: Ledger address to look up

        Returns:
            Money set, empty when the address holds nothing

        Raises:
            BalanceQueryError: If the ledger can't be queried
        """
        pass


class BalanceQueryError(Exception):
    """The ledger balance lookup failed."""
    pass
