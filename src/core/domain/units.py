"""
LedgerUnits — Централизованный модуль конверсии единиц ledger

Единственный допустимый способ преобразований между:
- Amount (базовые единицы, int произвольной точности, например wei)
- DisplayAmount (десятичная строка в отображаемой единице, например ether)

DisplayAmount = Amount / 10^scale
Amount = DisplayAmount × 10^scale (дробный остаток отбрасывается к нулю)

ЗАПРЕЩЕНО конвертировать суммы через float: значения в базовых единицах
регулярно превышают 2^53.
"""

from decimal import Decimal
from enum import Enum
from typing import Final

from src.core.math.exact_decimal import (
    InvalidAmount,
    fraction_digits,
    pow10,
    scale_up,
    to_decimal,
    validate_non_negative_int,
    validate_scale,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Масштаб отображаемой единицы по умолчанию (ether = 10^18 wei)
DEFAULT_SCALE: Final[int] = 18

# Максимальное значение машинного слова ledger (uint256)
UINT256_MAX: Final[int] = 2**256 - 1


# =============================================================================
# ДЕНОМИНАЦИИ
# =============================================================================


class Denomination(str, Enum):
    """Именованные единицы семейства ether."""

    WEI = "wei"
    KWEI = "kwei"
    MWEI = "mwei"
    GWEI = "gwei"
    SZABO = "szabo"
    FINNEY = "finney"
    ETHER = "ether"


DENOMINATION_SCALES: Final[dict[Denomination, int]] = {
    Denomination.WEI: 0,
    Denomination.KWEI: 3,
    Denomination.MWEI: 6,
    Denomination.GWEI: 9,
    Denomination.SZABO: 12,
    Denomination.FINNEY: 15,
    Denomination.ETHER: 18,
}


def get_scale(unit: Denomination | str) -> int:
    """
    Масштаб деноминации.

    Args:
        unit: Denomination или имя единицы (регистр не важен)

    Returns:
        Число разрядов базовой единицы

    Raises:
        ValueError: Если единица неизвестна
    """
    try:
        denomination = Denomination(unit.lower() if isinstance(unit, str) else unit)
    except ValueError:
        known = ", ".join(d.value for d in Denomination)
        raise ValueError(f"Unknown denomination {unit!r} (known: {known})") from None
    return DENOMINATION_SCALES[denomination]


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def to_base_units(
    display: str | int | Decimal | float,
    scale: int = DEFAULT_SCALE,
    strict: bool = False,
) -> int:
    """
    Конверсия: DisplayAmount → Amount

    Amount = display × 10^scale, точная арифметика. Дробный остаток
    ниже базовой единицы отбрасывается к нулю (если не strict).

    Args:
        display: Неотрицательная десятичная строка, int, Decimal или float
        scale: Число разрядов базовой единицы (например, 18)
        strict: Запретить дробные разряды сверх scale

    Returns:
        Сумма в базовых единицах

    Raises:
        InvalidAmount: Если значение отрицательное, нечисловое, или
            (в strict режиме) содержит больше scale дробных разрядов,
            или результат длиннее MAX_AMOUNT_DIGITS цифр
        ValueError: Если scale некорректен

    Examples:
        >>> to_base_units("1.5", 18)
        1500000000000000000
        >>> to_base_units("0.0000001", 6)
        0
    """
    validate_scale(scale)
    value = to_decimal(display)

    if value < 0:
        raise InvalidAmount(f"Amount cannot be negative: {display!r}")

    if strict and fraction_digits(value) > scale:
        raise InvalidAmount(
            f"Amount {display!r} has more than {scale} fractional digits "
            f"(sub-base-unit remainder)"
        )

    return scale_up(value, scale)


def from_base_units(amount: int, scale: int = DEFAULT_SCALE) -> str:
    """
    Конверсия: Amount → DisplayAmount

    Точное деление целочисленным divmod, без экспоненциальной записи,
    хвостовые нули дробной части отбрасываются.

    Args:
        amount: Неотрицательное целое в базовых единицах (любой величины,
            в том числе UINT256_MAX)
        scale: Число разрядов базовой единицы

    Returns:
        Десятичная строка

    Raises:
        InvalidAmount: Если amount отрицательный или не int

    Examples:
        >>> from_base_units(10**18, 18)
        '1'
        >>> from_base_units(1, 18)
        '0.000000000000000001'
    """
    validate_non_negative_int(amount, "amount")
    validate_scale(scale)

    if scale == 0:
        return str(amount)

    whole, remainder = divmod(amount, pow10(scale))
    fraction = str(remainder).zfill(scale).rstrip("0")

    if not fraction:
        return str(whole)
    return f"{whole}.{fraction}"


# =============================================================================
# ИМЕНОВАННЫЕ ЕДИНИЦЫ
# =============================================================================


def to_wei(value: str | int | Decimal | float, unit: Denomination | str = Denomination.ETHER) -> int:
    """Сумма в указанной единице → wei."""
    return to_base_units(value, get_scale(unit))


def from_wei(amount: int, unit: Denomination | str = Denomination.ETHER) -> str:
    """Сумма в wei → десятичная строка в указанной единице."""
    return from_base_units(amount, get_scale(unit))


def to_atto(value: str | int | Decimal | float) -> int:
    """Токен с 18 разрядами: отображаемая единица → atto-единицы."""
    return to_base_units(value, DEFAULT_SCALE)


def from_atto(amount: int) -> str:
    """Токен с 18 разрядами: atto-единицы → отображаемая единица."""
    return from_base_units(amount, DEFAULT_SCALE)


def parse_quantity(quantity: str | int) -> int:
    """
    Разбор количества вида "50 gwei" в базовые единицы.

    Число без единицы трактуется как базовые единицы. Остаток ниже
    одного wei запрещён.

    Args:
        quantity: int (уже в wei) или строка "<число> [единица]"

    Returns:
        Сумма в wei

    Raises:
        InvalidAmount: Если строка не разбирается или сумма некорректна
        ValueError: Если единица неизвестна

    Examples:
        >>> parse_quantity("50 gwei")
        50000000000
        >>> parse_quantity(21000)
        21000
    """
    if isinstance(quantity, int) and not isinstance(quantity, bool):
        validate_non_negative_int(quantity, "quantity")
        return quantity

    if not isinstance(quantity, str):
        raise InvalidAmount(f"Unsupported quantity type: {type(quantity).__name__}")

    parts = quantity.split()
    if len(parts) == 1:
        return to_base_units(parts[0], 0, strict=True)
    if len(parts) == 2:
        number, unit = parts
        return to_base_units(number, get_scale(unit), strict=True)

    raise InvalidAmount(f"Cannot parse quantity: {quantity!r}")
