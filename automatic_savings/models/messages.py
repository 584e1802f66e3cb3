"""
Request, Message and Response Models

Messages use the externally-tagged snake_case layout the ledger runtime
speaks:

    {"transfer": {"received_funds": {"denom": "UST", "amount": "8500"},
                  "savings_rate": 15}}
    {"flush": {}}
    {"get_balance": {}}

Exactly one variant key must be present.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from automatic_savings.models.coin import Coin, Coins


# =============================================================================
# REQUEST CONTEXT - supplied by the execution environment
# =============================================================================

class MessageInfo(BaseModel):
    """
    Caller identity and funds attached to a request.

    The sender is already authenticated by the environment.
    """
    model_config = ConfigDict(frozen=True)

    sender: str = Field(..., min_length=1)
    funds: Coins = Field(default_factory=list)


class Env(BaseModel):
    """Execution environment facts for the current call."""
    model_config = ConfigDict(frozen=True)

    contract_address: str = Field(..., min_length=1)


# =============================================================================
# INBOUND MESSAGES
# =============================================================================

class InstantiateMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    savings_rate: int = Field(..., ge=0, le=255)


class TransferMsg(BaseModel):
    """Split the received funds, not the total funds held by the contract."""
    model_config = ConfigDict(extra="forbid")

    received_funds: Coin
    savings_rate: int = Field(..., ge=0, le=255)


class FlushMsg(BaseModel):
    """Send every coin the contract holds to the owner."""
    model_config = ConfigDict(extra="forbid")


class GetBalanceMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")


def _exactly_one(model: BaseModel, variants: tuple[str, ...]) -> None:
    present = [name for name in variants if getattr(model, name) is not None]
    if len(present) != 1:
        raise ValueError(
            f"Expected exactly one of {', '.join(variants)}; got {len(present)}"
        )


class ExecuteMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    transfer: Optional[TransferMsg] = None
    flush: Optional[FlushMsg] = None

    @model_validator(mode='after')
    def validate_variant(self) -> 'ExecuteMsg':
        _exactly_one(self, ("transfer", "flush"))
        return self


class QueryMsg(BaseModel):
    model_config = ConfigDict(extra="forbid")

    get_balance: Optional[GetBalanceMsg] = None

    @model_validator(mode='after')
    def validate_variant(self) -> 'QueryMsg':
        _exactly_one(self, ("get_balance",))
        return self


# =============================================================================
# OUTBOUND - transfer instructions and responses
# =============================================================================

class BankSend(BaseModel):
    """
    A transfer instruction for the ledger runtime to execute.

    Producing one does not move funds; execution is delegated.
    """
    model_config = ConfigDict(frozen=True)

    to_address: str
    amount: Coins


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Response(BaseModel):
    """Result of a successful transition."""

    messages: list[BankSend] = Field(default_factory=list)
    attributes: list[Attribute] = Field(default_factory=list)

    def add_message(self, message: BankSend) -> 'Response':
        self.messages.append(message)
        return self

    def add_attribute(self, key: str, value: str) -> 'Response':
        self.attributes.append(Attribute(key=key, value=value))
        return self

    def attribute(self, key: str) -> Optional[str]:
        """Value of the first attribute with this key, if any."""
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None


class BalanceResponse(BaseModel):
    balance: Coins = Field(default_factory=list)
