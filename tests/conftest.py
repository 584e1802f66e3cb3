"""Shared fixtures: a contract wired to in-memory collaborators."""

import pytest

from automatic_savings.config import DEFAULT_OWNER_ADDRESS, ContractSettings
from automatic_savings.models import Env
from automatic_savings.orchestrator import SavingsContract
from automatic_savings.services import (
    Bech32AddressValidator,
    InMemoryBank,
    InMemoryStateStorage,
)


OWNER = DEFAULT_OWNER_ADDRESS
CONTRACT_ADDRESS = "cosmos2contract"


@pytest.fixture
def settings() -> ContractSettings:
    return ContractSettings(
        owner_address=OWNER,
        address_prefix="wasm",
        contract_name="crates.io:automatic-savings",
        contract_version="0.1.0",
        rate_source="message",
    )


@pytest.fixture
def env() -> Env:
    return Env(contract_address=CONTRACT_ADDRESS)


@pytest.fixture
def storage() -> InMemoryStateStorage:
    return InMemoryStateStorage()


@pytest.fixture
def bank() -> InMemoryBank:
    return InMemoryBank()


@pytest.fixture
def validator() -> Bech32AddressValidator:
    return Bech32AddressValidator("wasm")


@pytest.fixture
def contract(storage, bank, settings) -> SavingsContract:
    return SavingsContract(storage=storage, bank=bank, settings=settings)
