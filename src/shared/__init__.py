# src/shared/__init__.py
"""
Общий код HTTP-границы.

Модули:
- models: модели ответов (ошибки, health check)
"""

__all__: list[str] = []
