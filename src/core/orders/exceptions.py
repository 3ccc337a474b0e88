# src/core/orders/exceptions.py
"""
Доменные ошибки заказов.
HTTP-граница сопоставляет каждый тип своему статус-коду.
"""

from __future__ import annotations

from src.common.constants import (
    INVALID_DAYS_MESSAGE,
    NO_RECENT_ORDERS_MESSAGE,
    ORDER_CREATION_FAILED_MESSAGE,
)


class OrderError(Exception):
    """Базовая ошибка домена заказов."""

    default_message = "Order error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class OrderValidationError(OrderError):
    """Некорректный ввод клиента (400)."""

    default_message = INVALID_DAYS_MESSAGE


class OrderConflictError(OrderError):
    """Хранилище отклонило запись: дубликат или недопустимое состояние (409)."""

    default_message = "Order conflicts with existing data."


class OrderNotFoundError(OrderError):
    """Нет заказов, удовлетворяющих запросу (404)."""

    default_message = NO_RECENT_ORDERS_MESSAGE


class OrderCreationFailedError(OrderError):
    """Хранилище не вернуло созданную запись (400)."""

    default_message = ORDER_CREATION_FAILED_MESSAGE
