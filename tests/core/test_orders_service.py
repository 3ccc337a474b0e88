# tests/core/test_orders_service.py
"""
Тесты для сервиса заказов.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from src.common.constants import (
    INVALID_DAYS_MESSAGE,
    NO_RECENT_ORDERS_MESSAGE,
    ORDER_CREATION_FAILED_MESSAGE,
)
from src.core.orders.exceptions import (
    OrderConflictError,
    OrderCreationFailedError,
    OrderNotFoundError,
    OrderValidationError,
)
from src.core.orders.models import CreateOrderRequest
from src.core.orders.service import OrderService


class TestGetRecentOrders:
    """Тесты для OrderService.get_recent_orders."""

    @pytest.mark.asyncio
    async def test_empty_store_raises_not_found(self, memory_repository) -> None:
        """Пустой результат превращается в OrderNotFoundError."""
        service = OrderService(memory_repository)

        with pytest.raises(OrderNotFoundError) as exc_info:
            await service.get_recent_orders()

        assert exc_info.value.message == NO_RECENT_ORDERS_MESSAGE

    @pytest.mark.asyncio
    async def test_returns_last_day_newest_first(
        self, repository_factory, order_factory, fixed_now: datetime
    ) -> None:
        """Возвращаются только заказы за сутки, новые первыми, без удалённых."""
        repository = repository_factory(
            orders=[
                order_factory(1, fixed_now - timedelta(hours=3)),
                order_factory(2, fixed_now - timedelta(minutes=5)),
                order_factory(3, fixed_now - timedelta(hours=25)),
                order_factory(4, fixed_now - timedelta(hours=1), is_deleted=True),
            ]
        )
        service = OrderService(repository)

        result = await service.get_recent_orders()

        assert [order.id for order in result] == [2, 1]

    @pytest.mark.asyncio
    async def test_only_deleted_orders_is_not_found(
        self, repository_factory, order_factory, fixed_now: datetime
    ) -> None:
        """Удалённые заказы не учитываются."""
        repository = repository_factory(
            orders=[order_factory(1, fixed_now - timedelta(hours=1), is_deleted=True)]
        )

        with pytest.raises(OrderNotFoundError):
            await OrderService(repository).get_recent_orders()


class TestCreateOrder:
    """Тесты для OrderService.create_order."""

    @pytest.mark.asyncio
    async def test_create_success(self, memory_repository, fixed_now: datetime) -> None:
        """Созданный заказ получает ID и видим в последних заказах."""
        service = OrderService(memory_repository)

        order = await service.create_order(
            CreateOrderRequest(name="Desk", description="Oak desk", is_invoiced=False)
        )

        assert order.id == 1
        assert order.entry_date == fixed_now
        assert order.is_invoiced is False
        assert order.is_deleted is False
        recent = await service.get_recent_orders()
        assert [o.id for o in recent] == [order.id]

    @pytest.mark.asyncio
    async def test_sequential_ids(self, memory_repository) -> None:
        """Каждый новый заказ получает новый ID."""
        service = OrderService(memory_repository)
        request = CreateOrderRequest(name="Desk", description="Oak desk")

        first = await service.create_order(request)
        second = await service.create_order(request)

        assert second.id != first.id

    @pytest.mark.asyncio
    async def test_none_from_store_raises_creation_failed(
        self, memory_repository, sample_create_request: CreateOrderRequest
    ) -> None:
        """Отсутствие созданной записи даёт OrderCreationFailedError."""
        memory_repository.fail_create = True

        with pytest.raises(OrderCreationFailedError) as exc_info:
            await OrderService(memory_repository).create_order(sample_create_request)

        assert exc_info.value.message == ORDER_CREATION_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_conflict_propagates(self, sample_create_request: CreateOrderRequest) -> None:
        """Конфликт хранилища пробрасывается без изменений."""
        repository = AsyncMock()
        repository.create_order.side_effect = OrderConflictError()

        with pytest.raises(OrderConflictError):
            await OrderService(repository).create_order(sample_create_request)


class TestGetOrdersWithinDays:
    """Тесты для OrderService.get_orders_within_days."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("days", [0, -1, -30])
    async def test_non_positive_days_rejected_before_store(self, memory_repository, days: int) -> None:
        """days <= 0 отклоняется до обращения к хранилищу."""
        service = OrderService(memory_repository)

        with pytest.raises(OrderValidationError) as exc_info:
            await service.get_orders_within_days(days)

        assert exc_info.value.message == INVALID_DAYS_MESSAGE
        assert memory_repository.calls == []

    @pytest.mark.asyncio
    async def test_empty_window_is_valid(self, memory_repository) -> None:
        """Пустое окно возвращает пустой список, а не ошибку."""
        result = await OrderService(memory_repository).get_orders_within_days(3)

        assert result == []
        assert memory_repository.calls == ["list_orders_in_range"]

    @pytest.mark.asyncio
    async def test_window_extends_over_weekend_and_holiday(
        self, repository_factory, order_factory
    ) -> None:
        """Окно за 2 дня от среды 21.08 начинается в пятницу 16.08."""
        utc = timezone.utc
        repository = repository_factory(
            orders=[
                order_factory(1, datetime(2024, 8, 15, 23, 59, tzinfo=utc)),
                order_factory(2, datetime(2024, 8, 16, 0, 0, tzinfo=utc)),
                order_factory(3, datetime(2024, 8, 18, 10, 0, tzinfo=utc)),
                order_factory(4, datetime(2024, 8, 20, 8, 0, tzinfo=utc)),
                order_factory(5, datetime(2024, 8, 21, 0, 0, tzinfo=utc)),
                order_factory(6, datetime(2024, 8, 21, 9, 0, tzinfo=utc)),
                order_factory(7, datetime(2024, 8, 19, 9, 0, tzinfo=utc), is_deleted=True),
            ]
        )

        result = await OrderService(repository).get_orders_within_days(2)

        assert [order.id for order in result] == [5, 4, 3, 2]
