"""Services package."""

from automatic_savings.services.bank import (
    BalanceQuerierInterface,
    BalanceQueryError,
    InMemoryBank,
)
from automatic_savings.services.identity import (
    AddressValidatorInterface,
    Bech32AddressValidator,
    InvalidAddressError,
)
from automatic_savings.services.storage import (
    InMemoryStateStorage,
    Item,
    NotFoundError,
    SerializationError,
    StateStorageInterface,
    StorageError,
)

__all__ = [
    # Bank services
    "BalanceQuerierInterface",
    "BalanceQueryError",
    "InMemoryBank",
    # Identity services
    "AddressValidatorInterface",
    "Bech32AddressValidator",
    "InvalidAddressError",
    # Storage services
    "InMemoryStateStorage",
    "Item",
    "NotFoundError",
    "SerializationError",
    "StateStorageInterface",
    "StorageError",
]
