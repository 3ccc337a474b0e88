# src/core/__init__.py
"""
Доменный слой (Core Domain).
Чистая бизнес-логика, независимая от HTTP.
"""

from src.core.orders import Order, OrderService

__all__ = [
    "Order",
    "OrderService",
]
