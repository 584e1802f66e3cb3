"""
Audit Logger

DESIGN DECISION: Every successful transition is logged as a structured
event. This provides:
1. Traceability of every transfer instruction the contract produced
2. Debugging capability when a split looks off

The audit logger:
- Is synchronous, like the contract itself
- Only writes to the structured log; there is no transfer history store
- Supports correlation IDs to trace one dispatched request
"""

from uuid import UUID, uuid4

import structlog

from automatic_savings.models.audit import AuditEvent, AuditEventBuilder
from automatic_savings.models.coin import Coin


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """Central audit logging service for contract transitions."""

    def __init__(self, logger_name: str = "automatic_savings.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_instantiated(
        self,
        sender: str,
        contract_address: str,
        owner: str,
        savings_rate: int,
        amount_received: list[Coin],
        correlation_id: UUID,
    ) -> None:
        """Log contract instantiation."""
        self.log(AuditEventBuilder.contract_instantiated(
            sender=sender,
            contract_address=contract_address,
            owner=owner,
            savings_rate=savings_rate,
            amount_received=amount_received,
            correlation_id=correlation_id,
        ))

    def log_transfer_split(
        self,
        sender: str,
        received: Coin,
        forwarded: Coin,
        savings_rate: int,
        correlation_id: UUID,
    ) -> None:
        """Log a revenue split."""
        self.log(AuditEventBuilder.transfer_split(
            sender=sender,
            received=received,
            forwarded=forwarded,
            savings_rate=savings_rate,
            correlation_id=correlation_id,
        ))

    def log_flushed(
        self,
        sender: str,
        contract_address: str,
        balance: list[Coin],
        correlation_id: UUID,
    ) -> None:
        """Log a flush of the whole balance."""
        self.log(AuditEventBuilder.balance_flushed(
            sender=sender,
            contract_address=contract_address,
            balance=balance,
            correlation_id=correlation_id,
        ))

    def log_balance_queried(
        self,
        contract_address: str,
        balance: list[Coin],
        correlation_id: UUID,
    ) -> None:
        self.log(AuditEventBuilder.balance_queried(
            contract_address=contract_address,
            balance=balance,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for one dispatched request.
    """
    return uuid4()
