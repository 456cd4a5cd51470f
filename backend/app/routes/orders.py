"""
Mobile Bazar Backend — Order Route Handlers
=============================================

What:  Order endpoints backed by the `orders` collection.
Who:   Called by the storefront checkout, "my orders" and "manage orders" pages.

Routes:
    GET    /orders               every order (admin view)
    GET    /ordersData?email=    orders placed by one customer
    POST   /orders               place an order
    DELETE /orders/{id}          cancel an order
    PUT    /updateOrderStatus    change an order's status
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pymongo.asynchronous.database import AsyncDatabase

from app.database import get_database
from app.schemas.common import DeleteAck, ErrorResponse, InsertAck
from app.schemas.order import OrderStatusResult, OrderStatusUpdate
from app.services.order_service import order_service

router = APIRouter(tags=["Orders"])


@router.get(
    "/orders",
    response_model=List[Dict[str, Any]],
    summary="List all orders",
)
async def list_orders(db: AsyncDatabase = Depends(get_database)) -> List[Dict[str, Any]]:
    return await order_service.list_orders(db)


@router.get(
    "/ordersData",
    response_model=List[Dict[str, Any]],
    responses={400: {"description": "Missing email", "model": ErrorResponse}},
    summary="List the orders placed with an email address",
)
async def list_orders_for_email(
    email: Optional[str] = Query(default=None, description="Customer email (required)"),
    db: AsyncDatabase = Depends(get_database),
) -> List[Dict[str, Any]]:
    """
    Declared optional so that a missing email gets the same 400 envelope
    as every other validation failure; the service rejects it.
    """
    return await order_service.list_orders_for_email(db, email)


@router.post(
    "/orders",
    status_code=201,
    response_model=InsertAck,
    summary="Place an order",
)
async def create_order(
    payload: Dict[str, Any] = Body(..., description="Order document (email, product, address, ...)"),
    db: AsyncDatabase = Depends(get_database),
) -> InsertAck:
    return await order_service.create_order(db, payload)


@router.delete(
    "/orders/{order_id}",
    response_model=DeleteAck,
    responses={
        400: {"description": "Malformed order id", "model": ErrorResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
    },
    summary="Delete an order",
)
async def delete_order(
    order_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> DeleteAck:
    return await order_service.delete_order(db, order_id)


@router.put(
    "/updateOrderStatus",
    response_model=OrderStatusResult,
    responses={
        400: {"description": "Missing id or status", "model": ErrorResponse},
        404: {"description": "Order not found", "model": ErrorResponse},
    },
    summary="Set an order's status",
)
async def update_order_status(
    update: OrderStatusUpdate,
    db: AsyncDatabase = Depends(get_database),
) -> OrderStatusResult:
    return await order_service.update_status(db, update)
