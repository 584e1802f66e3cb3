"""Bank query services package."""

from automatic_savings.services.bank.interface import (
    BalanceQuerierInterface,
    BalanceQueryError,
)
from automatic_savings.services.bank.memory import InMemoryBank

__all__ = [
    "BalanceQuerierInterface",
    "BalanceQueryError",
    "InMemoryBank",
]
