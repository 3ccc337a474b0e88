# src/core/orders/service.py
"""
Сервис для работы с заказами.
Проверяет входные данные и переводит результаты хранилища в доменные исходы.
"""

from __future__ import annotations

from src.common.logger import log_info
from src.core.orders.exceptions import (
    OrderCreationFailedError,
    OrderNotFoundError,
    OrderValidationError,
)
from src.core.orders.models import CreateOrderRequest, Order
from src.core.orders.repository import OrderRepositoryProtocol


class OrderService:
    """
    Сервис заказов.

    Реализует:
    - Выборку последних заказов (пустой результат = OrderNotFoundError)
    - Создание заказа
    - Выборку заказов за N дней (пустой результат допустим)
    """

    def __init__(self, repository: OrderRepositoryProtocol) -> None:
        self._repository = repository

    async def get_recent_orders(self) -> list[Order]:
        """
        Возвращает неудалённые заказы за последние сутки, новые первыми.

        Raises:
            OrderNotFoundError: если заказов нет
        """
        orders = await self._repository.list_recent_orders()
        if not orders:
            raise OrderNotFoundError()
        return orders

    async def create_order(self, request: CreateOrderRequest) -> Order:
        """
        Создаёт заказ.

        Raises:
            OrderConflictError: хранилище отклонило запись
            OrderCreationFailedError: хранилище не вернуло созданный заказ
        """
        order = await self._repository.create_order(request)
        if order is None:
            raise OrderCreationFailedError()

        await log_info(f"Создан заказ {order.id}: {order.name}")
        return order

    async def get_orders_within_days(self, days: int) -> list[Order]:
        """
        Возвращает заказы за `days` дней (с расширением окна на выходные и праздники).

        Raises:
            OrderValidationError: если days <= 0 (до обращения к хранилищу)
        """
        if days <= 0:
            raise OrderValidationError()
        return await self._repository.list_orders_in_range(days)
