"""Ledger — тестовые хелперы поверх точной конверсии единиц.

- Протоколы клиента ledger и контракта токена
- Стоимость газа, снимки балансов, классификация ошибок
- check_token и переключатель debug-логирования
"""

from src.ledger.client import ZERO_ADDRESS, LedgerClient, TokenContract
from src.ledger.debug import configure_debug_logging
from src.ledger.helpers import (
    INVALID_OPCODE_MARKER,
    TOKEN_CHECK_ACCOUNTS,
    WRONG_ARGUMENTS_MARKER,
    TokenSnapshot,
    check_token,
    gas_used_of,
    get_accounts_balances,
    has_wrong_arguments,
    is_invalid_opcode,
    total_balance,
    tx_gas_cost,
)

__all__ = [
    # Client protocols
    "ZERO_ADDRESS",
    "LedgerClient",
    "TokenContract",
    # Gas
    "gas_used_of",
    "tx_gas_cost",
    # Balances
    "get_accounts_balances",
    "total_balance",
    # Error classifiers
    "INVALID_OPCODE_MARKER",
    "WRONG_ARGUMENTS_MARKER",
    "has_wrong_arguments",
    "is_invalid_opcode",
    # Token check
    "TOKEN_CHECK_ACCOUNTS",
    "TokenSnapshot",
    "check_token",
    # Logging
    "configure_debug_logging",
]
