"""Configuration package."""

from automatic_savings.config.settings import (
    DEFAULT_OWNER_ADDRESS,
    ContractSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "DEFAULT_OWNER_ADDRESS",
    "ContractSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
