# src/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# Тексты ответов HTTP-границы сервиса заказов
NO_RECENT_ORDERS_MESSAGE = "No recent orders found."
INVALID_DAYS_MESSAGE = "The number of days must be greater than zero."
ORDER_CREATION_FAILED_MESSAGE = "Order creation failed."
VALIDATION_ERRORS_TITLE = "One or more validation errors occurred."
INTERNAL_ERROR_MESSAGE = "Internal server error"
