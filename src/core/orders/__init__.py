# src/core/orders/__init__.py
"""
Домен заказов.
Модели, календарь выборки, репозиторий и сервис.
"""

from src.core.orders.calendar import HolidayCalendar, OrderWindow
from src.core.orders.exceptions import (
    OrderConflictError,
    OrderCreationFailedError,
    OrderError,
    OrderNotFoundError,
    OrderValidationError,
)
from src.core.orders.models import CreateOrderRequest, Order
from src.core.orders.repository import OrderRepository, OrderRepositoryProtocol
from src.core.orders.service import OrderService

__all__ = [
    "HolidayCalendar",
    "OrderWindow",
    "OrderError",
    "OrderValidationError",
    "OrderConflictError",
    "OrderNotFoundError",
    "OrderCreationFailedError",
    "Order",
    "CreateOrderRequest",
    "OrderRepository",
    "OrderRepositoryProtocol",
    "OrderService",
]
