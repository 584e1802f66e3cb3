"""
Address Validation

Validates the shape of bech32 addresses (`<prefix>1<data>`) before they
are written into contract state. Only the designated owner address is
validated; callers arrive already authenticated.

DESIGN DECISION: We check shape, not the bech32 checksum. The host chain
is the authority on checksums; here we only want to reject addresses
that are obviously malformed or belong to another chain.
"""

import re
from abc import ABC, abstractmethod


BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
MAX_ADDRESS_LENGTH = 90
MIN_DATA_LENGTH = 6  # checksum alone is 6 characters

_DATA_RE = re.compile(f"^[{BECH32_CHARSET}]+$")


class InvalidAddressError(Exception):
    """Address is malformed or has the wrong prefix."""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid address '{address}': {reason}")


class AddressValidatorInterface(ABC):

    @abstractmethod
    def validate(self, address: str) -> str:
        """
        Validate an address and return it in canonical form.

        Raises:
            InvalidAddressError: If the address is malformed
        """
        pass


class Bech32AddressValidator(AddressValidatorInterface):
    """Accepts lowercase bech32-shaped addresses with the expected prefix."""

    def __init__(self, prefix: str):
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def validate(self, address: str) -> str:
        if not address:
            raise InvalidAddressError(address, "empty address")
        if address != address.lower():
            # Mixed case is invalid bech32; upper case is not canonical
            raise InvalidAddressError(address, "address must be lowercase")
        if len(address) > MAX_ADDRESS_LENGTH:
            raise InvalidAddressError(
                address, f"longer than {MAX_ADDRESS_LENGTH} characters"
            )

        hrp, sep, data = address.rpartition("1")
        if not sep or not hrp:
            raise InvalidAddressError(address, "missing bech32 separator")
        if hrp != self._prefix:
            raise InvalidAddressError(
                address, f"expected prefix '{self._prefix}', got '{hrp}'"
            )
        if len(data) < MIN_DATA_LENGTH:
            raise InvalidAddressError(address, "data part too short")
        if not _DATA_RE.match(data):
            raise InvalidAddressError(address, "data part has non-bech32 characters")

        return address
