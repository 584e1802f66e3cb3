"""Contract transition engine package."""

from automatic_savings.contract.engine import (
    MAX_SAVINGS_RATE,
    MIN_SAVINGS_RATE,
    execute_flush,
    execute_transfer,
    instantiate,
    resolve_savings_rate,
    split_amount,
    validate_savings_rate,
)
from automatic_savings.contract.errors import (
    ContractError,
    EmptyBalance,
    EmptyTransfer,
    InfrastructureError,
    InvalidSavingsRate,
    Unauthorized,
    infrastructure_errors,
)

__all__ = [
    # Transitions
    "MAX_SAVINGS_RATE",
    "MIN_SAVINGS_RATE",
    "execute_flush",
    "execute_transfer",
    "instantiate",
    "resolve_savings_rate",
    "split_amount",
    "validate_savings_rate",
    # Errors
    "ContractError",
    "EmptyBalance",
    "EmptyTransfer",
    "InfrastructureError",
    "InvalidSavingsRate",
    "Unauthorized",
    "infrastructure_errors",
]
