"""
Transition Engine

The three state transitions of the savings contract. Each one checks
its preconditions in a fixed order, then computes the response. None of
them writes storage: instantiate returns the records to persist and the
dispatcher writes them, Transfer and Flush never change state at all.

CRITICAL: The split uses truncating integer division. The remainder
(at most 99 units of the smallest denomination per transfer) is neither
forwarded nor tracked. Changing that changes every payout.
"""

from automatic_savings.contract.errors import (
    EmptyBalance,
    EmptyTransfer,
    InvalidSavingsRate,
    Unauthorized,
    infrastructure_errors,
)
from automatic_savings.models.coin import Coin
from automatic_savings.models.messages import (
    BankSend,
    Env,
    InstantiateMsg,
    MessageInfo,
    Response,
)
from automatic_savings.models.state import ContractVersion, State
from automatic_savings.services.bank import BalanceQuerierInterface
from automatic_savings.services.identity import AddressValidatorInterface


MIN_SAVINGS_RATE = 1
MAX_SAVINGS_RATE = 100


def instantiate(
    info: MessageInfo,
    msg: InstantiateMsg,
    owner_address: str,
    address_validator: AddressValidatorInterface,
    contract_version: ContractVersion,
) -> tuple[State, ContractVersion, Response]:
    """
    Build the configuration record.

    Anyone may instantiate; the owner is always the configured address,
    never the sender. The savings rate is stored as given.
    """
    with infrastructure_errors():
        owner = address_validator.validate(owner_address)

    state = State(
        owner=owner,
        amount_received=list(info.funds),
        savings_rate=msg.savings_rate,
    )
    response = (
        Response()
        .add_attribute("action", "instantiate")
        .add_attribute("rate", str(msg.savings_rate))
    )
    return state, contract_version, response


def resolve_savings_rate(state: State, requested: int, rate_source: str) -> int:
    """Pick the per-call rate or the stored one."""
    if rate_source == "stored":
        return state.savings_rate
    return requested


def validate_savings_rate(savings_rate: int) -> None:
    if not MIN_SAVINGS_RATE <= savings_rate <= MAX_SAVINGS_RATE:
        raise InvalidSavingsRate(savings_rate)


def split_amount(amount: int, savings_rate: int) -> int:
    """Portion of `amount` forwarded to the owner, truncated."""
    return (MAX_SAVINGS_RATE - savings_rate) * amount // MAX_SAVINGS_RATE


def execute_transfer(
    state: State,
    info: MessageInfo,
    received_funds: Coin,
    savings_rate: int,
) -> Response:
    """
    Forward the spend portion of a received payment to the owner.

    Checks, in order: rate bounds, owner, non-zero amount. A split that
    rounds down to zero is still sent.
    """
    validate_savings_rate(savings_rate)

    if info.sender != state.owner:
        raise Unauthorized()

    if received_funds.amount <= 0:
        raise EmptyTransfer()

    forward = Coin(
        denom=received_funds.denom,
        amount=split_amount(received_funds.amount, savings_rate),
    )

    return (
        Response()
        .add_message(BankSend(to_address=state.owner, amount=[forward]))
        .add_attribute("action", "transfer")
    )


def execute_flush(
    state: State,
    env: Env,
    info: MessageInfo,
    bank: BalanceQuerierInterface,
) -> Response:
    """Send the contract's entire balance to the owner."""
    if info.sender != state.owner:
        raise Unauthorized()

    with infrastructure_errors():
        balance = bank.query_all_balances(env.contract_address)

    if not balance:
        raise EmptyBalance()

    return (
        Response()
        .add_message(BankSend(to_address=state.owner, amount=balance))
        .add_attribute("action", "flush")
    )
