# src/services/__init__.py
"""
HTTP-сервисы приложения.

Сервисы:
- orders_service: последние заказы, создание заказа, выборка за N дней
"""

__all__: list[str] = []
