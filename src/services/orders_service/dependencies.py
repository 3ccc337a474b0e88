# src/services/orders_service/dependencies.py
"""
Зависимости для Orders Service.
Инициализация и управление ресурсами.
"""

from __future__ import annotations

from typing import Optional

from src.common.constants import TypeMsg
from src.common.logger import log_info
from src.config import settings
from src.core.orders import HolidayCalendar, OrderRepository, OrderService
from src.infra.database import DatabaseManager, close_db, get_db, init_db


# Глобальные экземпляры ресурсов
_db: Optional[DatabaseManager] = None
_order_service: Optional[OrderService] = None


def build_order_service(db: DatabaseManager) -> OrderService:
    """Собирает OrderService поверх PostgreSQL с календарём из конфигурации."""
    repository = OrderRepository(
        db,
        calendar=HolidayCalendar.from_pairs(settings.calendar.HOLIDAYS),
        recent_hours=settings.calendar.RECENT_ORDERS_HOURS,
    )
    return OrderService(repository)


async def init_dependencies() -> None:
    """Инициализация всех зависимостей сервиса."""
    global _db, _order_service

    await init_db()
    _db = get_db()
    _order_service = build_order_service(_db)

    await log_info("Orders Service инициализирован", type_msg=TypeMsg.INFO)


async def close_dependencies() -> None:
    """Закрытие всех ресурсов."""
    global _db, _order_service

    if _db is not None:
        await close_db()
    _db = None
    _order_service = None


def get_database() -> DatabaseManager:
    """Получение экземпляра DatabaseManager."""
    if _db is None:
        raise RuntimeError("DatabaseManager не инициализирован")
    return _db


def get_order_service() -> OrderService:
    """Получение экземпляра OrderService (FastAPI Depends)."""
    if _order_service is None:
        raise RuntimeError("OrderService не инициализирован")
    return _order_service
