"""
Persisted Contract State

Two records live in contract storage:
1. State - the configuration record (owner, savings rate, funds received)
2. ContractVersion - name/version metadata written once at instantiation

CRITICAL: State is written only by Initialize. Transfer and Flush read it
but never modify it, so a failed operation cannot leave it half-written.
"""

from pydantic import BaseModel, ConfigDict, Field

from automatic_savings.models.coin import Coins


# Storage keys
STATE_KEY = "state"
CONTRACT_INFO_KEY = "contract_info"


class State(BaseModel):
    """
    The contract's single configuration record.

    `amount_received` is a snapshot of the funds attached to the
    instantiation request. Nothing reads it afterwards; it is kept
    as historical metadata.
    """
    model_config = ConfigDict(frozen=True)

    owner: str = Field(
        ...,
        min_length=1,
        description="Designated owner address (validated at creation)"
    )
    amount_received: Coins = Field(
        default_factory=list,
        description="Funds attached to the instantiation request"
    )
    savings_rate: int = Field(
        ...,
        ge=0,
        le=255,
        description="Percentage retained on each transfer (u8, unchecked at creation)"
    )


class ContractVersion(BaseModel):
    """Contract metadata consumed by migration tooling."""
    model_config = ConfigDict(frozen=True)

    contract: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
