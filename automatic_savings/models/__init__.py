"""
Data Models Package

This package contains all Pydantic models used by the savings contract.
Everything crossing the contract boundary must conform to these schemas.
"""

from automatic_savings.models.coin import (
    UINT128_MAX,
    Coin,
    Coins,
    coins,
)
from automatic_savings.models.state import (
    CONTRACT_INFO_KEY,
    STATE_KEY,
    ContractVersion,
    State,
)
from automatic_savings.models.messages import (
    Attribute,
    BalanceResponse,
    BankSend,
    Env,
    ExecuteMsg,
    FlushMsg,
    GetBalanceMsg,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
    Response,
    TransferMsg,
)
from automatic_savings.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Money
    "UINT128_MAX",
    "Coin",
    "Coins",
    "coins",
    # State
    "CONTRACT_INFO_KEY",
    "STATE_KEY",
    "ContractVersion",
    "State",
    # Messages
    "Attribute",
    "BalanceResponse",
    "BankSend",
    "Env",
    "ExecuteMsg",
    "FlushMsg",
    "GetBalanceMsg",
    "InstantiateMsg",
    "MessageInfo",
    "QueryMsg",
    "Response",
    "TransferMsg",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
