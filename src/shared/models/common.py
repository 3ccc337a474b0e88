# src/shared/models/common.py
"""
Общие модели ответов HTTP-границы.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Стандартный ответ с ошибкой (без внутренних деталей)."""

    detail: str


class ValidationErrorResponse(BaseModel):
    """Ответ 400 с ошибками по полям: {"name": ["The name field is required."]}."""

    title: str
    status: int = 400
    errors: dict[str, list[str]] = Field(default_factory=dict)


class HealthStatus(BaseModel):
    """Статус здоровья сервиса."""

    service: str
    status: str = "healthy"  # healthy, degraded
    version: str | None = None
    dependencies: dict[str, Any] = Field(default_factory=dict)
