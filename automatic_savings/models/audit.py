"""
Audit Models for Automatic Savings

Every successful transition is described by an AuditEvent and written
to the structured log. This gives:
1. Traceability of what the contract produced for each request
2. Debugging information when a split looks wrong

DESIGN DECISION: Audit events are logged, not stored. The contract keeps
no history of past transfers; the ledger runtime is the record of what
actually moved.

Failures are NOT audited here. They are raised to the caller and that
is their only channel.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from automatic_savings.models.coin import Coin


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit, one per exposed operation."""
    CONTRACT_INSTANTIATED = "contract_instantiated"
    TRANSFER_SPLIT = "transfer_split"
    BALANCE_FLUSHED = "balance_flushed"
    BALANCE_QUERIED = "balance_queried"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"


class AuditEvent(BaseModel):
    """
    A single audit event.

    One is created for each successful transition or query.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Who and where
    contract_address: Optional[str] = Field(
        default=None,
        description="Address of the contract the event relates to"
    )
    sender: Optional[str] = Field(
        default=None,
        description="Caller that triggered the operation"
    )

    # Correlation - one id per dispatched request
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events of one request"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "contract_address": self.contract_address,
            "sender": self.sender,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


def _coins_detail(amount: list[Coin]) -> list[dict]:
    return [{"denom": c.denom, "amount": str(c.amount)} for c in amount]


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transfer_split(sender, received, forwarded, 15)
    """

    @staticmethod
    def contract_instantiated(
        sender: str,
        contract_address: str,
        owner: str,
        savings_rate: int,
        amount_received: list[Coin],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CONTRACT_INSTANTIATED,
            sender=sender,
            contract_address=contract_address,
            correlation_id=correlation_id,
            description=f"Contract instantiated for owner {owner}",
            details={
                "owner": owner,
                "savings_rate": savings_rate,
                "amount_received": _coins_detail(amount_received),
            },
        )

    @staticmethod
    def transfer_split(
        sender: str,
        received: Coin,
        forwarded: Coin,
        savings_rate: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_SPLIT,
            sender=sender,
            correlation_id=correlation_id,
            description=f"Split {received}: forwarded {forwarded} at {savings_rate}% savings",
            details={
                "received": str(received.amount),
                "forwarded": str(forwarded.amount),
                "denom": received.denom,
                "savings_rate": savings_rate,
            },
        )

    @staticmethod
    def balance_flushed(
        sender: str,
        contract_address: str,
        balance: list[Coin],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_FLUSHED,
            sender=sender,
            contract_address=contract_address,
            correlation_id=correlation_id,
            description=f"Flushed {len(balance)} denomination(s) to owner",
            details={
                "balance": _coins_detail(balance),
            },
        )

    @staticmethod
    def balance_queried(
        contract_address: str,
        balance: list[Coin],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_QUERIED,
            severity=AuditSeverity.DEBUG,
            contract_address=contract_address,
            correlation_id=correlation_id,
            description=f"Balance queried: {len(balance)} denomination(s)",
            details={
                "balance": _coins_detail(balance),
            },
        )
