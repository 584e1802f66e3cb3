"""
Contract Dispatcher for Automatic Savings

This module ties the components together and exposes the three entry
points an execution environment calls:
1. instantiate (create the configuration record)
2. execute (Transfer or Flush)
3. query (GetBalance, answered as JSON bytes)

DESIGN DECISION: The dispatcher owns every storage write. Transitions
compute their full outcome first; only a successful instantiation is
persisted, so a failed call leaves storage untouched.

The environment guarantees calls are serialized; nothing here locks.
"""

from typing import Optional, Type, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel

from automatic_savings.audit import AuditLogger, create_correlation_id
from automatic_savings.config import ContractSettings, get_settings
from automatic_savings.contract import (
    execute_flush,
    execute_transfer,
    infrastructure_errors,
    instantiate,
    resolve_savings_rate,
)
from automatic_savings.models.messages import (
    Env,
    ExecuteMsg,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
    Response,
)
from automatic_savings.models.state import (
    CONTRACT_INFO_KEY,
    STATE_KEY,
    ContractVersion,
    State,
)
from automatic_savings.queries import QueryExecutor
from automatic_savings.services.bank import BalanceQuerierInterface, InMemoryBank
from automatic_savings.services.identity import (
    AddressValidatorInterface,
    Bech32AddressValidator,
)
from automatic_savings.services.storage import (
    InMemoryStateStorage,
    Item,
    StateStorageInterface,
    StorageError,
)


STATE: Item[State] = Item(STATE_KEY, State)
CONTRACT_INFO: Item[ContractVersion] = Item(CONTRACT_INFO_KEY, ContractVersion)

MsgT = TypeVar("MsgT", bound=BaseModel)
RawMsg = Union[BaseModel, dict, str, bytes]


def decode_msg(model: Type[MsgT], msg: RawMsg) -> MsgT:
    """Accept a decoded model, a dict or raw JSON."""
    if isinstance(msg, model):
        return msg
    if isinstance(msg, (str, bytes)):
        return model.model_validate_json(msg)
    if isinstance(msg, BaseModel):
        return model.model_validate(msg.model_dump())
    return model.model_validate(msg)


class SavingsContract:
    """
    Dispatches requests to the transition engine.

    Flow per request:
    1. Decode message
    2. Load state
    3. Run one transition
    4. Persist (instantiate only)
    5. Audit and return the response
    """

    def __init__(
        self,
        storage: StateStorageInterface,
        bank: BalanceQuerierInterface,
        address_validator: Optional[AddressValidatorInterface] = None,
        settings: Optional[ContractSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._settings = settings or get_settings().contract
        self._storage = storage
        self._bank = bank
        self._address_validator = address_validator or Bech32AddressValidator(
            self._settings.address_prefix
        )
        self._query_executor = QueryExecutor(bank)
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def settings(self) -> ContractSettings:
        return self._settings

    def instantiate(
        self,
        env: Env,
        info: MessageInfo,
        msg: RawMsg,
        correlation_id: Optional[UUID] = None,
    ) -> Response:
        """
        Create the configuration record and version metadata.

        Any caller may instantiate. Re-instantiating overwrites the record.
        """
        correlation_id = correlation_id or create_correlation_id()
        msg = decode_msg(InstantiateMsg, msg)

        version = ContractVersion(
            contract=self._settings.contract_name,
            version=self._settings.contract_version,
        )
        state, version, response = instantiate(
            info,
            msg,
            owner_address=self._settings.owner_address,
            address_validator=self._address_validator,
            contract_version=version,
        )

        with infrastructure_errors():
            self._save_records([(CONTRACT_INFO, version), (STATE, state)])

        self._audit_logger.log_instantiated(
            sender=info.sender,
            contract_address=env.contract_address,
            owner=state.owner,
            savings_rate=state.savings_rate,
            amount_received=state.amount_received,
            correlation_id=correlation_id,
        )
        return response

    def execute(
        self,
        env: Env,
        info: MessageInfo,
        msg: RawMsg,
        correlation_id: Optional[UUID] = None,
    ) -> Response:
        """Run Transfer or Flush. Neither modifies stored state."""
        correlation_id = correlation_id or create_correlation_id()
        msg = decode_msg(ExecuteMsg, msg)

        state = self.load_state()

        if msg.transfer is not None:
            savings_rate = resolve_savings_rate(
                state, msg.transfer.savings_rate, self._settings.rate_source
            )
            response = execute_transfer(
                state, info, msg.transfer.received_funds, savings_rate
            )
            self._audit_logger.log_transfer_split(
                sender=info.sender,
                received=msg.transfer.received_funds,
                forwarded=response.messages[0].amount[0],
                savings_rate=savings_rate,
                correlation_id=correlation_id,
            )
            return response

        response = execute_flush(state, env, info, self._bank)
        self._audit_logger.log_flushed(
            sender=info.sender,
            contract_address=env.contract_address,
            balance=response.messages[0].amount,
            correlation_id=correlation_id,
        )
        return response

    def query(
        self,
        env: Env,
        msg: RawMsg,
        correlation_id: Optional[UUID] = None,
    ) -> bytes:
        """Answer a query message as JSON bytes."""
        correlation_id = correlation_id or create_correlation_id()
        msg = decode_msg(QueryMsg, msg)

        result = self._query_executor.execute(env, msg)

        self._audit_logger.log_balance_queried(
            contract_address=env.contract_address,
            balance=result.balance,
            correlation_id=correlation_id,
        )
        return result.model_dump_json().encode("utf-8")

    def _save_records(self, records: list[tuple[Item, BaseModel]]) -> None:
        """
        Write every record or none of them.

        On a failed write the keys touched so far are restored to their
        previous bytes (or removed) before the error propagates.
        """
        previous: dict[str, Optional[bytes]] = {}
        for item, _ in records:
            previous[item.key] = (
                self._storage.load(item.key) if item.exists(self._storage) else None
            )

        try:
            for item, value in records:
                item.save(self._storage, value)
        except StorageError:
            for key, raw in previous.items():
                if raw is None:
                    self._storage.remove(key)
                else:
                    self._storage.save(key, raw)
            raise

    def load_state(self) -> State:
        """Load the configuration record; missing state is an infrastructure failure."""
        with infrastructure_errors():
            return STATE.load(self._storage)

    def contract_version(self) -> ContractVersion:
        with infrastructure_errors():
            return CONTRACT_INFO.load(self._storage)


def create_contract(
    settings: Optional[ContractSettings] = None,
) -> tuple[SavingsContract, InMemoryStateStorage, InMemoryBank]:
    """
    Factory function wiring a contract to in-memory collaborators.

    Returns:
        (contract, storage, bank)
    """
    storage = InMemoryStateStorage()
    bank = InMemoryBank()
    contract = SavingsContract(
        storage=storage,
        bank=bank,
        settings=settings,
    )
    return contract, storage, bank
