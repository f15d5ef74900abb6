"""
HelperSettings — настройки тестовых хелперов ledger

Значения читаются из окружения (и необязательного .env) один раз через
get_settings() и передаются вызывающему коду явными параметрами:
окружение не читается посреди вычислений.

Переменные окружения:
- GAS_PRICE (по умолчанию 21 gwei, допускается запись "50 gwei")
- QB_DEBUG, SOLIDITY_COVERAGE, NETWORK, NETWORKS_FILE
- RPC_HOST, RPC_PORT, INFURA_API_TOKEN
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.domain.units import parse_quantity

logger = logging.getLogger(__name__)

# 21 gwei
DEFAULT_GAS_PRICE: Final[int] = 21_000_000_000

DEFAULT_NETWORK: Final[str] = "development"


class HelperSettings(BaseSettings):
    """Настройки процесса для тестовых хелперов ledger."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    gas_price: int = Field(default=DEFAULT_GAS_PRICE, ge=0)
    debug: bool = Field(default=False, validation_alias=AliasChoices("qb_debug", "debug"))
    coverage: bool = Field(
        default=False, validation_alias=AliasChoices("solidity_coverage", "coverage")
    )

    network: str = DEFAULT_NETWORK
    networks_file: Optional[Path] = None
    rpc_host: Optional[str] = None
    rpc_port: Optional[int] = Field(default=None, ge=1, le=65535)
    provider_token: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("infura_api_token", "provider_token")
    )

    @field_validator("gas_price", mode="before")
    @classmethod
    def parse_gas_price(cls, v: Any) -> Any:
        """Количество вида "50 gwei"; иначе значение по умолчанию с предупреждением."""
        if not isinstance(v, str):
            return v
        try:
            return parse_quantity(v)
        except ValueError:
            logger.warning(
                "GAS_PRICE %r is not a valid quantity, using default %s", v, DEFAULT_GAS_PRICE
            )
            return DEFAULT_GAS_PRICE


@lru_cache
def get_settings() -> HelperSettings:
    return HelperSettings()
