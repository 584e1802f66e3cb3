"""
Money Models

A Coin is a (denomination, amount) pair as reported by the ledger.
Amounts are unsigned 128-bit integers; on the wire they travel as
decimal strings so large values survive JSON round trips.

DESIGN DECISION: A money set is a plain list of Coins with a validator
attached, not a custom container. The ledger hands us lists and expects
lists back, so we keep that shape.
"""

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)


UINT128_MAX = 2**128 - 1


class Coin(BaseModel):
    """A single money value in one denomination."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    denom: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Denomination (e.g., 'uatom', 'UST')"
    )
    amount: int = Field(
        ...,
        ge=0,
        le=UINT128_MAX,
        description="Non-negative integer amount in the smallest unit"
    )

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount_type(cls, v: object) -> object:
        """Only integers and decimal strings are money; bools and floats are not."""
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            raise ValueError("amount must be an integer or a decimal string")
        if isinstance(v, str) and not (v.isascii() and v.isdigit()):
            raise ValueError(f"amount is not a decimal string: {v!r}")
        return v

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: int) -> str:
        """Uint128 values are encoded as strings."""
        return str(amount)

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


def _unique_denoms(coins: list[Coin]) -> list[Coin]:
    seen = set()
    for c in coins:
        if c.denom in seen:
            raise ValueError(f"Duplicate denomination in money set: {c.denom}")
        seen.add(c.denom)
    return coins


# Ordered collection of coins with unique denominations
Coins = Annotated[list[Coin], AfterValidator(_unique_denoms)]


def coins(amount: int, denom: str) -> list[Coin]:
    """Build a single-entry money set."""
    return [Coin(denom=denom, amount=amount)]
