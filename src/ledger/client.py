"""
Ledger client protocols — интерфейсы коллабораторов тестовых хелперов

Конкретный клиент (RPC транспорт, аккаунты, подпись) предоставляет
тестовое окружение; хелперы зависят только от этих структурных протоколов.
"""

from typing import Any, Final, Protocol, runtime_checkable

ZERO_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"


@runtime_checkable
class LedgerClient(Protocol):
    """Запросы балансов и receipt к узлу ledger."""

    @property
    def block_number(self) -> int:
        ...

    def get_balance(self, address: str) -> int:
        ...

    def get_transaction_receipt(self, tx_hash: str) -> Any:
        ...


@runtime_checkable
class TokenContract(Protocol):
    """Read-only представление контракта fungible токена."""

    def total_supply(self) -> int:
        ...

    def balance_of(self, address: str) -> int:
        ...
