"""Config — настройки процесса и документ профилей сетей.

- HelperSettings: переменные окружения, читаются один раз
- NetworkConfig: networks.json, JSON Schema + immutable модели
"""

from src.config.networks import (
    COVERAGE_NETWORK,
    DEFAULT_NETWORKS_FILE,
    NetworkConfig,
    NetworkConfigError,
    NetworkProfile,
    RpcEndpoint,
    active_network_name,
    load_active_network,
    load_network_config,
    parse_network_config,
    resolve_network,
)
from src.config.settings import (
    DEFAULT_GAS_PRICE,
    DEFAULT_NETWORK,
    HelperSettings,
    get_settings,
)

__all__ = [
    # Settings
    "DEFAULT_GAS_PRICE",
    "DEFAULT_NETWORK",
    "HelperSettings",
    "get_settings",
    # Networks
    "COVERAGE_NETWORK",
    "DEFAULT_NETWORKS_FILE",
    "NetworkConfig",
    "NetworkConfigError",
    "NetworkProfile",
    "RpcEndpoint",
    "active_network_name",
    "load_active_network",
    "load_network_config",
    "parse_network_config",
    "resolve_network",
]
