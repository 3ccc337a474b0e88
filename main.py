#!/usr/bin/env python3
# main.py
"""
Главная точка входа Orders Service.
Запускает HTTP API или только применяет схему БД в зависимости от аргументов.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

from src.config import settings
from src.common.logger import setup_logging, log_info, log_error
from src.common.constants import TypeMsg
from src.infra.database import init_db, close_db


VALID_MODES = ("orders_service", "migrate")


async def run_orders_service() -> None:
    """Запускает Orders Service (последние заказы, создание, выборка за N дней)."""
    import uvicorn

    await log_info(
        f"Запуск Orders Service на {settings.deployment.ORDERS_SERVICE_HOST}:"
        f"{settings.deployment.ORDERS_SERVICE_PORT}...",
        type_msg=TypeMsg.INFO
    )

    config = uvicorn.Config(
        "src.services.orders_service.app:app",
        host=settings.deployment.ORDERS_SERVICE_HOST,
        port=settings.deployment.ORDERS_SERVICE_PORT,
        reload=settings.system.DEBUG,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    try:
        await server.serve()
    except asyncio.CancelledError:
        await log_info("Orders Service: graceful shutdown", type_msg=TypeMsg.DEBUG)
        await server.shutdown()


async def run_migrations() -> None:
    """Подключается к PostgreSQL, применяет схему и отключается."""
    await log_info("Применение схемы БД...", type_msg=TypeMsg.INFO)
    try:
        await init_db()
        await log_info("Схема БД применена", type_msg=TypeMsg.INFO)
    finally:
        await close_db()


async def main(mode: Optional[str] = None) -> None:
    """
    Главная функция запуска.

    Args:
        mode: Режим запуска. Если None, берётся orders_service.
    """
    setup_logging()
    mode = mode or "orders_service"

    await log_info(
        f"{settings.system.PROJECT_NAME} v{settings.system.VERSION} — запуск в режиме '{mode}'",
        type_msg=TypeMsg.INFO
    )

    try:
        if mode == "orders_service":
            # Подключение к БД выполняет lifespan приложения
            await run_orders_service()
        elif mode == "migrate":
            await run_migrations()
        else:
            await log_error(f"Неизвестный режим: {mode}")
    except KeyboardInterrupt:
        await log_info("Получен сигнал остановки (Ctrl+C)", type_msg=TypeMsg.INFO)
    except asyncio.CancelledError:
        await log_info("Задача отменена, выполняется graceful shutdown", type_msg=TypeMsg.INFO)
    except Exception as e:
        await log_error(f"Критическая ошибка: {e}", exc_info=True)
        raise
    finally:
        await log_info("Приложение остановлено", type_msg=TypeMsg.INFO)


def print_usage() -> None:
    """Выводит справку по использованию."""
    print(f"""
{settings.system.PROJECT_NAME} v{settings.system.VERSION} — сервис заказов

Использование:
    python main.py [mode]

Режимы:
    orders_service         — HTTP API (:{settings.deployment.ORDERS_SERVICE_PORT}), по умолчанию
    migrate                — только применить migrations/init.sql

Примеры:
    python main.py                       # HTTP API
    python main.py migrate               # Создать таблицу orders
    """)


if __name__ == "__main__":
    mode = None

    if len(sys.argv) > 1:
        arg = sys.argv[1].lower()
        if arg in ("--help", "-h"):
            print_usage()
            sys.exit(0)
        elif arg in VALID_MODES:
            mode = arg
        else:
            print(f"Неизвестный режим: {arg}")
            print_usage()
            sys.exit(1)

    try:
        asyncio.run(main(mode))
    except KeyboardInterrupt:
        print("\nПрограмма завершена")
