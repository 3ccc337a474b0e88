# src/core/orders/models.py
"""
Модели данных заказов.
JSON-представление использует camelCase (entryDate, isInvoiced, ...).
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Текущее время в UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


class Order(BaseModel):
    """Модель заказа."""

    id: int = Field(..., description="ID заказа (назначается хранилищем)")
    name: str = Field(..., description="Название заказа")
    description: str = Field(..., description="Описание заказа")
    entry_date: datetime = Field(default_factory=utc_now, description="Время создания (UTC)")
    is_invoiced: bool = Field(True, description="Выставлен ли счёт")
    is_deleted: bool = Field(False, description="Признак мягкого удаления")

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class CreateOrderRequest(BaseModel):
    """DTO для создания заказа."""

    name: str = Field(..., description="Название заказа")
    description: str = Field(..., description="Описание заказа")
    is_invoiced: bool = Field(True, description="Выставлен ли счёт")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("name", "description")
    @classmethod
    def require_text(cls, v: str, info) -> str:
        """Пустая строка или строка из пробелов считается отсутствующим значением."""
        if not v.strip():
            raise ValueError(f"The {info.field_name} field is required.")
        return v
