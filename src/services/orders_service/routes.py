from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from src.common.constants import INTERNAL_ERROR_MESSAGE
from src.common.logger import log_error
from src.core.orders import (
    CreateOrderRequest,
    Order,
    OrderConflictError,
    OrderCreationFailedError,
    OrderNotFoundError,
    OrderService,
    OrderValidationError,
)
from src.services.orders_service.dependencies import get_order_service
from src.shared.models.common import ErrorResponse, ValidationErrorResponse

router = APIRouter(prefix="/orders", tags=["Orders"])


def internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


@router.get(
    "/recentOrders",
    response_model=list[Order],
    responses={
        404: {"content": {"text/plain": {}}, "description": "No recent orders"},
        500: {"model": ErrorResponse},
    },
)
async def get_recent_orders(service: OrderService = Depends(get_order_service)):
    """Orders created within the last day, newest first."""
    try:
        return await service.get_recent_orders()
    except OrderNotFoundError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_404_NOT_FOUND)
    except OrderValidationError as e:
        await log_error(f"Argument error on recent orders: {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        await log_error(f"Something went wrong: {e}", exc_info=True)
        return internal_error()


@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_order(
    payload: CreateOrderRequest,
    request: Request,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    """Create an order; Location points at the recent-orders listing."""
    try:
        order = await service.create_order(payload)
    except OrderConflictError as e:
        await log_error(f"Conflict on saving order: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except OrderCreationFailedError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    except OrderNotFoundError as e:
        await log_error(f"Key not found on saving order: {e}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        await log_error(f"Error on saving data: {e}", exc_info=True)
        return internal_error()

    location = request.url_for("get_recent_orders").include_query_params(id=order.id)
    response.headers["Location"] = str(location)
    return order


@router.get(
    "/ordersWithinDays/{days}",
    response_model=list[Order],
    responses={
        400: {"content": {"text/plain": {}}, "description": "days <= 0"},
        500: {"model": ErrorResponse},
    },
)
async def get_orders_within_days(
    days: int,
    service: OrderService = Depends(get_order_service),
):
    """Orders of the last `days` days; an empty list is a valid answer."""
    try:
        return await service.get_orders_within_days(days)
    except OrderValidationError as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        await log_error(f"Something went wrong: {e}", exc_info=True)
        return internal_error()
