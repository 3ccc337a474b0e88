# src/services/orders_service/app.py
"""
FastAPI приложение для Orders Service.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.common.constants import TypeMsg, VALIDATION_ERRORS_TITLE
from src.common.logger import log_info, setup_logging
from src.config import settings
from src.services.orders_service.routes import router
from src.shared.models.common import HealthStatus, ValidationErrorResponse


# =============================================================================
# LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Жизненный цикл приложения."""
    setup_logging()
    await log_info("Orders Service запускается...", type_msg=TypeMsg.INFO)

    from src.services.orders_service.dependencies import init_dependencies, close_dependencies
    await init_dependencies()

    yield

    await close_dependencies()
    await log_info("Orders Service остановлен", type_msg=TypeMsg.INFO)


# =============================================================================
# ПРИЛОЖЕНИЕ
# =============================================================================

app = FastAPI(
    title="Orders Service",
    description="Сервис заказов: последние заказы, создание, выборка за N дней",
    version=settings.system.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix=settings.deployment.API_PREFIX)


# =============================================================================
# ОШИБКИ ВАЛИДАЦИИ
# =============================================================================

def collect_field_errors(errors: list[dict[str, Any]]) -> dict[str, list[str]]:
    """
    Группирует ошибки pydantic по полям.
    Источник ("body", "path", "query") отбрасывается из пути поля.
    """
    field_errors: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:]
        field = ".".join(loc) or "request"
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        field_errors.setdefault(field, []).append(message)
    return field_errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Ошибки схемы запроса отдаются как 400 с картой ошибок по полям."""
    await log_info(
        f"Невалидный запрос {request.method} {request.url.path}: {exc.errors()}",
        type_msg=TypeMsg.DEBUG,
    )
    body = ValidationErrorResponse(
        title=VALIDATION_ERRORS_TITLE,
        status=status.HTTP_400_BAD_REQUEST,
        errors=collect_field_errors(list(exc.errors())),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


# =============================================================================
# HEALTH CHECK
# =============================================================================

@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check() -> HealthStatus:
    """Проверка здоровья сервиса."""
    from src.services.orders_service.dependencies import get_database

    deps = {}

    try:
        db = get_database()
        deps["postgres"] = "healthy" if await db.health_check() else "unhealthy"
    except Exception:
        deps["postgres"] = "unhealthy"

    overall = "healthy" if all(v == "healthy" for v in deps.values()) else "degraded"

    return HealthStatus(
        service="orders_service",
        status=overall,
        version=settings.system.VERSION,
        dependencies=deps,
    )
