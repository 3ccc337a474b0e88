# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import json
import os
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("DB_PASSWORD", "test_password")

from src.core.orders.calendar import HolidayCalendar
from src.core.orders.models import CreateOrderRequest, Order


# Среда, 2024-08-21: за два дня до неё понедельник 19.08 (праздник по умолчанию)
FIXED_NOW = datetime(2024, 8, 21, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def config_path(project_root: Path) -> Path:
    """Путь к файлу конфигурации."""
    return project_root / "config" / "config.json"


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment_system": "test",
        "PROJECT_NAME": "orders_service_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "test",
        "ORDERS_SERVICE_HOST": "127.0.0.1",
        "ORDERS_SERVICE_PORT": 9090,
        "API_PREFIX": "api/",
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "json",
        "LOG_MAX_BYTES": 1024,
        "DB_HOST": "db.local",
        "DB_PORT": 5433,
        "DB_NAME": "orders_test",
        "DB_USER": "tester",
        "DB_PASSWORD": "test_password",
        "DB_MIN_POOL_SIZE": 1,
        "DB_MAX_POOL_SIZE": 3,
        "DB_COMMAND_TIMEOUT": 30,
        "DB_RETRY_ATTEMPTS": 2,
        "DB_RETRY_DELAY": 0.5,
        "HOLIDAYS": [[1, 1], [12, 25]],
        "RECENT_ORDERS_HOURS": 12,
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Создаёт временный файл конфигурации."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2))
    return config_file


# =============================================================================
# ФИКСТУРЫ ИНФРАСТРУКТУРЫ (МОКИ)
# =============================================================================

@pytest.fixture
def mock_db() -> AsyncMock:
    """Мок менеджера базы данных."""
    db = AsyncMock()
    db.fetchrow = AsyncMock(return_value=None)
    db.fetch = AsyncMock(return_value=[])
    db.execute = AsyncMock(return_value="INSERT 0 1")
    db.fetchval = AsyncMock(return_value=None)
    return db


class InMemoryOrderRepository:
    """
    Хранилище заказов в памяти.
    Повторяет правила OrderRepository: мягкое удаление, сортировка, окно календаря.
    """

    def __init__(
        self,
        orders: Optional[list[Order]] = None,
        calendar: Optional[HolidayCalendar] = None,
        now: datetime = FIXED_NOW,
        recent_hours: int = 24,
    ) -> None:
        self.orders: list[Order] = list(orders or [])
        self.calendar = calendar or HolidayCalendar.default()
        self.now = now
        self.recent_hours = recent_hours
        self.calls: list[str] = []
        self.fail_create = False

    def _visible(self) -> list[Order]:
        return [o for o in self.orders if not o.is_deleted]

    async def list_recent_orders(self) -> list[Order]:
        self.calls.append("list_recent_orders")
        since = self.now - timedelta(hours=self.recent_hours)
        found = [o for o in self._visible() if o.entry_date > since]
        return sorted(found, key=lambda o: o.entry_date, reverse=True)

    async def create_order(self, request: CreateOrderRequest) -> Optional[Order]:
        self.calls.append("create_order")
        if self.fail_create:
            return None
        order = Order(
            id=max((o.id for o in self.orders), default=0) + 1,
            name=request.name,
            description=request.description,
            is_invoiced=request.is_invoiced,
            entry_date=self.now,
        )
        self.orders.append(order)
        return order

    async def list_orders_in_range(self, days: int) -> list[Order]:
        self.calls.append("list_orders_in_range")
        window = self.calendar.window(days, self.now.date())
        found = [o for o in self._visible() if o.entry_date in window]
        return sorted(found, key=lambda o: o.entry_date, reverse=True)


def make_order(
    order_id: int,
    entry_date: datetime,
    name: str = "Order",
    is_deleted: bool = False,
) -> Order:
    """Создаёт заказ с заданной датой создания."""
    return Order(
        id=order_id,
        name=f"{name} {order_id}",
        description="Test description",
        entry_date=entry_date,
        is_invoiced=True,
        is_deleted=is_deleted,
    )


@pytest.fixture
def fixed_now() -> datetime:
    """Фиксированное "сейчас" для детерминированных тестов."""
    return FIXED_NOW


@pytest.fixture
def today(fixed_now: datetime) -> date:
    return fixed_now.date()


@pytest.fixture
def memory_repository() -> InMemoryOrderRepository:
    """Пустое хранилище заказов в памяти."""
    return InMemoryOrderRepository()


# =============================================================================
# ФИКСТУРЫ МОДЕЛЕЙ
# =============================================================================

@pytest.fixture
def sample_order_row(fixed_now: datetime) -> dict[str, Any]:
    """Пример строки заказа из БД."""
    return {
        "id": 1,
        "name": "Office chairs",
        "description": "Ten ergonomic chairs",
        "entry_date": fixed_now,
        "is_invoiced": True,
        "is_deleted": False,
    }


@pytest.fixture
def sample_create_request() -> CreateOrderRequest:
    """Пример запроса на создание заказа."""
    return CreateOrderRequest(name="Office chairs", description="Ten ergonomic chairs")


@pytest.fixture
def order_factory():
    """Фабрика заказов: order_factory(id, entry_date, ...)."""
    return make_order


@pytest.fixture
def repository_factory():
    """Фабрика хранилищ в памяти: repository_factory(orders=[...], now=...)."""
    return InMemoryOrderRepository
