# src/core/orders/repository.py
"""
Репозиторий для работы с заказами в БД.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional, Protocol

import asyncpg

from src.common.logger import log_debug, log_warning
from src.core.orders.calendar import HolidayCalendar
from src.core.orders.exceptions import OrderConflictError
from src.core.orders.models import CreateOrderRequest, Order, utc_now
from src.infra.database import DatabaseManager


ORDER_COLUMNS = "id, name, description, entry_date, is_invoiced, is_deleted"


class OrderRepositoryProtocol(Protocol):
    """Узкий интерфейс хранилища заказов, которым пользуется OrderService."""

    async def list_recent_orders(self) -> list[Order]: ...

    async def create_order(self, request: CreateOrderRequest) -> Optional[Order]: ...

    async def list_orders_in_range(self, days: int) -> list[Order]: ...


class OrderRepository:
    """Репозиторий заказов (PostgreSQL)."""

    def __init__(
        self,
        db: DatabaseManager,
        calendar: HolidayCalendar | None = None,
        recent_hours: int = 24,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Инициализация репозитория.

        Args:
            db: Менеджер базы данных (Dependency Injection)
            calendar: Календарь праздников для выборки за N дней
            recent_hours: Глубина выборки "последних" заказов в часах
            clock: Источник текущего времени UTC
        """
        self._db = db
        self._calendar = calendar or HolidayCalendar.default()
        self._recent_hours = recent_hours
        self._clock = clock

    async def list_recent_orders(self) -> list[Order]:
        """
        Заказы за последние `recent_hours` часов, новые первыми.
        Удалённые заказы не возвращаются.
        """
        since = self._clock() - timedelta(hours=self._recent_hours)
        rows = await self._db.fetch(
            f"""
            SELECT {ORDER_COLUMNS}
            FROM orders
            WHERE entry_date > $1
              AND is_deleted = FALSE
            ORDER BY entry_date DESC
            """,
            since,
        )
        return [self._row_to_order(row) for row in rows]

    async def create_order(self, request: CreateOrderRequest) -> Optional[Order]:
        """
        Создаёт новый заказ.

        Args:
            request: Проверенные данные заказа

        Returns:
            Созданный заказ с назначенным ID или None, если БД не вернула строку

        Raises:
            OrderConflictError: если запись нарушает ограничения таблицы
        """
        try:
            row = await self._db.fetchrow(
                f"""
                INSERT INTO orders (name, description, is_invoiced, entry_date)
                VALUES ($1, $2, $3, $4)
                RETURNING {ORDER_COLUMNS}
                """,
                request.name,
                request.description,
                request.is_invoiced,
                self._clock(),
            )
        except asyncpg.IntegrityConstraintViolationError as e:
            await log_warning(f"Конфликт при создании заказа '{request.name}': {e}")
            raise OrderConflictError() from e

        if row is None:
            return None

        order = self._row_to_order(row)
        await log_debug(f"Заказ {order.id} создан")
        return order

    async def list_orders_in_range(self, days: int) -> list[Order]:
        """
        Заказы за `days` дней, где начало окна сдвинуто назад
        с выходных и праздников. Удалённые заказы не возвращаются.
        """
        window = self._calendar.window(days, self._clock().date())
        rows = await self._db.fetch(
            f"""
            SELECT {ORDER_COLUMNS}
            FROM orders
            WHERE entry_date >= $1
              AND entry_date <= $2
              AND is_deleted = FALSE
            ORDER BY entry_date DESC
            """,
            window.start,
            window.end,
        )
        return [self._row_to_order(row) for row in rows]

    @staticmethod
    def _row_to_order(row) -> Order:
        """Преобразует строку БД в модель Order."""
        return Order(**dict(row))
