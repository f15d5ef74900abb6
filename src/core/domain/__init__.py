"""
Domain value conversions.

Contains the ledger unit model: base-unit Amounts, display-unit strings and
named denominations.
"""

from src.core.domain.units import (
    DEFAULT_SCALE,
    DENOMINATION_SCALES,
    UINT256_MAX,
    Denomination,
    InvalidAmount,
    from_atto,
    from_base_units,
    from_wei,
    get_scale,
    parse_quantity,
    to_atto,
    to_base_units,
    to_wei,
)

__all__ = [
    # Constants
    "DEFAULT_SCALE",
    "DENOMINATION_SCALES",
    "UINT256_MAX",
    # Types
    "Denomination",
    "InvalidAmount",
    # Base conversions
    "to_base_units",
    "from_base_units",
    # Named units
    "get_scale",
    "to_wei",
    "from_wei",
    "to_atto",
    "from_atto",
    "parse_quantity",
]
