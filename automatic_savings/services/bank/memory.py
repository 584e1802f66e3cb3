"""In-memory ledger view for tests and local hosts."""

from typing import Optional

from automatic_savings.models.coin import Coin
from automatic_savings.services.bank.interface import BalanceQuerierInterface


class InMemoryBank(BalanceQuerierInterface):
    """
    Balances held in a dict of address -> money set.

    Zero-amount coins are dropped, as the ledger never reports them.
    """

    def __init__(self, balances: Optional[dict[str, list[Coin]]] = None):
        self._balances: dict[str, list[Coin]] = {}
        for address, amount in (balances or {}).items():
            self.update_balance(address, amount)

    def update_balance(self, address: str, amount: list[Coin]) -> None:
        """Replace the balance of an address."""
        self._balances[address] = [c for c in amount if c.amount > 0]

    def query_all_balances(self, address: str) -> list[Coin]:
        return list(self._balances.get(address, []))
