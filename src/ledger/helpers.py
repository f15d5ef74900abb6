"""
Ledger test helpers — газ, балансы, классификация ошибок, проверка токена

Тонкий слой поверх LedgerClient / TokenContract для тестов контрактов:
- Стоимость транзакции в wei (gas_price передаётся явно)
- Снимок балансов набора аккаунтов
- Распознавание ошибок исполнения по тексту сообщения
- Проверка total supply и балансов токена в отображаемых единицах

Все суммы — int в базовых единицах; сравнение ожидаемых значений
выполняется точно, после конверсии ожидаемого значения в базовые единицы.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final, Optional

from src.core.domain.units import (
    Denomination,
    from_base_units,
    get_scale,
    to_base_units,
)
from src.core.math.exact_decimal import validate_non_negative_int
from src.ledger.client import LedgerClient, TokenContract

logger = logging.getLogger(__name__)

# Маркеры сообщений об ошибках исполнения
INVALID_OPCODE_MARKER: Final[str] = "invalid opcode"
WRONG_ARGUMENTS_MARKER: Final[str] = "contract constructor expected"

# Число аккаунтов (начиная с accounts[1]), проверяемых check_token
TOKEN_CHECK_ACCOUNTS: Final[int] = 5

ExpectedAmount = str | int | Decimal


# =============================================================================
# ГАЗ
# =============================================================================


def gas_used_of(receipt: Any) -> int:
    """
    Извлечение gasUsed из receipt.

    Поддерживает:
    - int (уже gasUsed)
    - Mapping с ключом "gasUsed" или "gas_used"
    - объект с атрибутом gasUsed / gas_used
    - результат транзакции с вложенным receipt

    Raises:
        ValueError: Если gasUsed не найден
    """
    if isinstance(receipt, int) and not isinstance(receipt, bool):
        return receipt

    if isinstance(receipt, Mapping):
        for key in ("gasUsed", "gas_used"):
            if key in receipt:
                return _as_int(receipt[key])
        if "receipt" in receipt:
            return gas_used_of(receipt["receipt"])
    else:
        for attr in ("gasUsed", "gas_used"):
            if hasattr(receipt, attr):
                return _as_int(getattr(receipt, attr))
        if hasattr(receipt, "receipt"):
            return gas_used_of(receipt.receipt)

    raise ValueError(f"Receipt has no gasUsed: {receipt!r}")


def _as_int(value: Any) -> int:
    # RPC-ответы могут содержать hex-строки ("0x5208")
    if isinstance(value, str):
        return int(value, 0)
    return int(value)


def tx_gas_cost(receipt: Any, gas_price: int) -> int:
    """
    Стоимость транзакции в wei: gas_price × gasUsed.

    Args:
        receipt: Receipt транзакции (см. gas_used_of)
        gas_price: Цена газа в wei (из HelperSettings.gas_price)

    Returns:
        Стоимость в wei

    Raises:
        InvalidAmount: Если gas_price или gasUsed отрицательные
    """
    validate_non_negative_int(gas_price, "gas_price")
    gas_used = gas_used_of(receipt)
    validate_non_negative_int(gas_used, "gas_used")
    return gas_price * gas_used


# =============================================================================
# БАЛАНСЫ
# =============================================================================


def get_accounts_balances(client: LedgerClient, accounts: Sequence[str]) -> dict[int, int]:
    """
    Снимок балансов аккаунтов.

    Returns:
        {позиция аккаунта в accounts: баланс в wei}
    """
    return {index: client.get_balance(account) for index, account in enumerate(accounts)}


def total_balance(balances: Mapping[Any, int] | Iterable[int]) -> int:
    """Точная сумма балансов (значения Mapping или элементы итерируемого)."""
    values = balances.values() if isinstance(balances, Mapping) else balances
    total = 0
    for value in values:
        validate_non_negative_int(value, "balance")
        total += value
    return total


# =============================================================================
# КЛАССИФИКАЦИЯ ОШИБОК
# =============================================================================


def is_invalid_opcode(error: BaseException | str) -> bool:
    """Ошибка исполнения из-за invalid opcode (revert/assert в контракте)."""
    return INVALID_OPCODE_MARKER in str(error)


def has_wrong_arguments(error: BaseException | str) -> bool:
    """Ошибка из-за неверного числа аргументов конструктора контракта."""
    return WRONG_ARGUMENTS_MARKER in str(error)


# =============================================================================
# ПРОВЕРКА ТОКЕНА
# =============================================================================


@dataclass(frozen=True)
class TokenSnapshot:
    """Состояние токена, прочитанное check_token (в базовых единицах)."""

    total_supply: int
    accounts: tuple[str, ...]
    balances: tuple[int, ...]


def check_token(
    token: TokenContract,
    accounts: Sequence[str],
    total_supply: Optional[ExpectedAmount] = None,
    balances: Optional[Sequence[ExpectedAmount]] = None,
    unit: Denomination | str = Denomination.ETHER,
) -> TokenSnapshot:
    """
    Проверка total supply и балансов токена.

    Читает total supply и балансы accounts[1..5] (accounts[0] — деплоер),
    логирует их в отображаемых единицах и сравнивает с ожидаемыми значениями.

    Args:
        token: Контракт токена
        accounts: Аккаунты теста
        total_supply: Ожидаемый total supply в единицах unit (None — не проверять)
        balances: Ожидаемые балансы проверяемых аккаунтов в единицах unit
        unit: Отображаемая единица (по умолчанию 18 разрядов)

    Returns:
        TokenSnapshot с прочитанными значениями

    Raises:
        AssertionError: Если значение не совпадает с ожидаемым
        ValueError: Если число ожидаемых балансов не совпадает с числом аккаунтов
        InvalidAmount: Если ожидаемое значение некорректно
    """
    scale = get_scale(unit)
    checked = tuple(accounts[1 : 1 + TOKEN_CHECK_ACCOUNTS])

    actual_supply = token.total_supply()
    actual_balances = tuple(token.balance_of(account) for account in checked)

    logger.debug("Total Supply: %s", from_base_units(actual_supply, scale))
    for position, (account, balance) in enumerate(zip(checked, actual_balances), start=1):
        logger.debug(
            "Account[%d] %s, Balance: %s", position, account, from_base_units(balance, scale)
        )

    if total_supply is not None:
        _assert_amount("total supply", actual_supply, total_supply, scale)

    if balances is not None:
        if len(balances) != len(checked):
            raise ValueError(
                f"Expected {len(checked)} balances, got {len(balances)}"
            )
        for position, (account, actual, expected) in enumerate(
            zip(checked, actual_balances, balances), start=1
        ):
            _assert_amount(f"balance of account[{position}] {account}", actual, expected, scale)

    return TokenSnapshot(
        total_supply=actual_supply,
        accounts=checked,
        balances=actual_balances,
    )


def _assert_amount(label: str, actual: int, expected: ExpectedAmount, scale: int) -> None:
    expected_base = to_base_units(expected, scale, strict=True)
    if actual != expected_base:
        raise AssertionError(
            f"{label}: expected {from_base_units(expected_base, scale)}, "
            f"got {from_base_units(actual, scale)}"
        )

