"""
Configuration Management for Automatic Savings

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The designated owner address is deployment configuration,
not a literal in the contract logic. Each deployment (and each test) can
inject its own owner.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from automatic_savings import __version__


DEFAULT_OWNER_ADDRESS = "wasm1pze5wsf0dg0fa4ysnttugn0m22ssf3t4a9yz3h"


class ContractSettings(BaseSettings):
    """
    Contract deployment settings.

    Loads from SAVINGS_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SAVINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    owner_address: str = Field(
        default=DEFAULT_OWNER_ADDRESS,
        description="Designated owner; the only caller allowed to transfer or flush"
    )
    address_prefix: str = Field(
        default="wasm",
        min_length=1,
        description="Human-readable bech32 prefix of valid addresses"
    )

    # Version metadata written at instantiation
    contract_name: str = Field(
        default="crates.io:automatic-savings",
        description="Contract name recorded for migration tooling"
    )
    contract_version: str = Field(
        default=__version__,
        description="Contract version recorded for migration tooling"
    )

    # Where Transfer takes its savings rate from.
    # "message" uses the per-call argument, "stored" uses State.savings_rate.
    rate_source: Literal["message", "stored"] = Field(
        default="message",
        description="Source of the savings rate used by Transfer"
    )

    @field_validator('owner_address', 'address_prefix')
    @classmethod
    def strip_value(cls, v: str) -> str:
        return v.strip()


class Settings(BaseSettings):
    """
    Root settings container.

    Sub-settings are loaded lazily on access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def contract(self) -> ContractSettings:
        return ContractSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid} plus `<name>_error`
    entries for failures. Useful for startup checks.
    """
    # Imported here to keep config free of service imports at module load
    from automatic_savings.services.identity import (
        Bech32AddressValidator,
        InvalidAddressError,
    )

    results: dict[str, object] = {}

    try:
        contract = get_settings().contract
        results["contract"] = True
    except Exception as e:
        results["contract"] = False
        results["contract_error"] = str(e)
        return results

    try:
        Bech32AddressValidator(contract.address_prefix).validate(contract.owner_address)
        results["owner_address"] = True
    except InvalidAddressError as e:
        results["owner_address"] = False
        results["owner_address_error"] = str(e)

    return results
