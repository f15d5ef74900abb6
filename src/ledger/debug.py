"""Переключатель debug-вывода ledger хелперов (QB_DEBUG)."""

import logging

from src.config.settings import HelperSettings

LEDGER_LOGGER_NAME = "src.ledger"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_debug_logging(settings: HelperSettings) -> logging.Logger:
    """
    Включение DEBUG-вывода логгера src.ledger при settings.debug.

    Идемпотентно: handler добавляется не более одного раза.

    Returns:
        Логгер src.ledger
    """
    ledger_logger = logging.getLogger(LEDGER_LOGGER_NAME)
    if not settings.debug:
        return ledger_logger

    ledger_logger.setLevel(logging.DEBUG)
    if not ledger_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        ledger_logger.addHandler(handler)
    return ledger_logger
