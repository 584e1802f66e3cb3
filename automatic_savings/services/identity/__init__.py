"""Address validation services package."""

from automatic_savings.services.identity.validator import (
    AddressValidatorInterface,
    Bech32AddressValidator,
    InvalidAddressError,
)

__all__ = [
    "AddressValidatorInterface",
    "Bech32AddressValidator",
    "InvalidAddressError",
]
