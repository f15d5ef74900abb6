"""
NetworkConfig — единая параметризованная конфигурация сетей

Один JSON документ (networks.json) описывает все профили сетей
(development, coverage, ropsten, ...). Документ валидируется по JSON Schema
(network_config.json), затем разбирается в immutable Pydantic модели.
Переопределения (RPC host/port, токен провайдера) берутся из HelperSettings.

Профили — это данные: модуль не создаёт провайдеров, не работает с ключами
и не устанавливает соединений.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional

import pydantic
from pydantic import BaseModel, Field, field_validator, model_validator

from src.config.settings import HelperSettings
from src.core.contracts import network_config_errors
from src.core.domain.units import parse_quantity

logger = logging.getLogger(__name__)

DEFAULT_NETWORKS_FILE: Final[Path] = Path(__file__).parent / "networks.json"

COVERAGE_NETWORK: Final[str] = "coverage"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NetworkConfigError(ValueError):
    """Конфигурация сетей не читается, не проходит схему или не содержит профиль."""


# =============================================================================
# MODELS
# =============================================================================


class RpcEndpoint(BaseModel):
    """RPC endpoint по умолчанию."""

    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)

    model_config = {"frozen": True}


class NetworkProfile(BaseModel):
    """
    Профиль одной сети.

    gas и gas_price хранятся в базовых единицах; в файле допускается
    запись вида "50 gwei".
    """

    name: str = Field(..., min_length=1, description="Имя профиля")
    host: Optional[str] = Field(None, description="RPC host (локальный узел)")
    port: Optional[int] = Field(None, ge=1, le=65535, description="RPC port")
    provider_url: Optional[str] = Field(None, description="URL внешнего провайдера")
    network_id: str = Field(..., description="Идентификатор сети ('*' — любая)")
    gas: Optional[int] = Field(None, ge=0, description="Лимит газа")
    gas_price: Optional[int] = Field(None, ge=0, description="Цена газа (wei)")

    model_config = {"frozen": True}

    @field_validator("gas", "gas_price", mode="before")
    @classmethod
    def parse_quantities(cls, v: Any) -> Any:
        if v is None:
            return v
        return parse_quantity(v)

    @model_validator(mode="after")
    def check_endpoint(self) -> "NetworkProfile":
        """Профиль адресуется либо provider_url, либо парой host + port."""
        if not self.provider_url and (self.host is None or self.port is None):
            raise ValueError(
                f"Network {self.name!r} needs provider_url or both host and port"
            )
        return self

    @property
    def endpoint_url(self) -> str:
        """URL для подключения клиента ledger."""
        if self.provider_url:
            return self.provider_url
        return f"http://{self.host}:{self.port}"

    @property
    def accepts_any_network(self) -> bool:
        return self.network_id == "*"


class NetworkConfig(BaseModel):
    """Набор профилей сетей."""

    networks: Dict[str, NetworkProfile]
    rpc: Optional[RpcEndpoint] = None

    model_config = {"frozen": True}

    def get(self, name: str) -> NetworkProfile:
        """
        Профиль сети по имени.

        Raises:
            NetworkConfigError: Если профиль не найден
        """
        try:
            return self.networks[name]
        except KeyError:
            known = ", ".join(sorted(self.networks))
            raise NetworkConfigError(f"Unknown network {name!r} (known: {known})") from None


# =============================================================================
# LOADING
# =============================================================================


def load_network_config(path: Path | str | None = None) -> NetworkConfig:
    """
    Загрузка и валидация конфигурации сетей.

    Args:
        path: Путь к JSON файлу (по умолчанию — networks.json пакета)

    Returns:
        NetworkConfig

    Raises:
        NetworkConfigError: Если файл не читается, не является JSON,
            не соответствует схеме или содержит некорректные количества
    """
    config_path = Path(path) if path is not None else DEFAULT_NETWORKS_FILE

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise NetworkConfigError(f"Cannot read network config {config_path}: {e}") from e

    return parse_network_config(data)


def parse_network_config(data: Dict[str, Any]) -> NetworkConfig:
    """
    Разбор уже загруженного документа конфигурации сетей.

    Все нарушения схемы перечисляются в одном сообщении.

    Raises:
        NetworkConfigError: Если документ не соответствует схеме
    """
    errors = network_config_errors(data)
    if errors:
        details = "; ".join(f"{_error_location(e)}: {e.message}" for e in errors)
        raise NetworkConfigError(f"Network config invalid at {details}")

    try:
        return NetworkConfig(
            networks={
                name: NetworkProfile(name=name, **entry)
                for name, entry in data["networks"].items()
            },
            rpc=data.get("rpc"),
        )
    except pydantic.ValidationError as e:
        raise NetworkConfigError(f"Network config invalid: {e}") from e


def _error_location(error) -> str:
    return "/".join(str(p) for p in error.absolute_path) or "<root>"


# =============================================================================
# RESOLUTION
# =============================================================================


def active_network_name(settings: HelperSettings) -> str:
    """Имя активной сети: coverage-прогон всегда использует coverage профиль."""
    if settings.coverage:
        return COVERAGE_NETWORK
    return settings.network


def resolve_network(config: NetworkConfig, settings: HelperSettings) -> NetworkProfile:
    """
    Выбор активного профиля с применением переопределений из окружения.

    - rpc_host / rpc_port заменяют host / port профилей локального узла
    - provider_token добавляется к provider_url

    Args:
        config: Загруженная конфигурация сетей
        settings: Настройки процесса

    Returns:
        Новый NetworkProfile (исходный не изменяется)

    Raises:
        NetworkConfigError: Если активная сеть отсутствует в конфигурации
    """
    profile = config.get(active_network_name(settings))
    updates: Dict[str, Any] = {}

    if profile.host is not None:
        if settings.rpc_host:
            updates["host"] = settings.rpc_host
        if settings.rpc_port:
            updates["port"] = settings.rpc_port

    if profile.provider_url and settings.provider_token:
        updates["provider_url"] = f"{profile.provider_url.rstrip('/')}/{settings.provider_token}"

    if updates:
        logger.debug("Overriding network %s fields: %s", profile.name, sorted(updates))
        profile = profile.model_copy(update=updates)

    return profile


def load_active_network(settings: HelperSettings) -> NetworkProfile:
    """Загрузка settings.networks_file (или файла пакета) и выбор активного профиля."""
    return resolve_network(load_network_config(settings.networks_file), settings)
