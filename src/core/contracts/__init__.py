"""
Contract Validation Module

Модуль для валидации JSON документов конфигурации ledger-хелперов.
"""

from .validators import (
    ContractValidator,
    NetworkConfigValidator,
    SchemaLoader,
    network_config_errors,
    validate_network_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NetworkConfigValidator",
    # Functions
    "network_config_errors",
    "validate_network_config",
]
