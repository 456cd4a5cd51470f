"""
Mobile Bazar Backend — Order Service
======================================

What:  Order placement, lookup, cancellation and status tracking on `orders`.
Who:   Called by the orders route handlers.

Orders are stored exactly as the storefront submits them. Only `status` is
ever written after creation, and only through update_status().
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo.asynchronous.database import AsyncDatabase

from app.database import ORDERS_COLLECTION
from app.exceptions import NotFoundError, ValidationError
from app.schemas.common import DeleteAck, InsertAck
from app.schemas.order import OrderStatusResult, OrderStatusUpdate
from app.services.repository import CollectionService, delete_ack, parse_object_id

logger = logging.getLogger(__name__)


class OrderService(CollectionService):
    """Business logic layer for order operations."""

    collection_name = ORDERS_COLLECTION
    resource = "order"

    async def list_orders(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        return await self._find_all(db)

    async def list_orders_for_email(
        self, db: AsyncDatabase, email: Optional[str]
    ) -> List[Dict[str, Any]]:
        """
        All orders placed with `email`.

        A missing or blank email is a client error, not an empty result.
        """
        if email is None or not email.strip():
            raise ValidationError(message="Query parameter 'email' is required", field="email")
        return await self._find_all(db, {"email": email})

    async def create_order(self, db: AsyncDatabase, payload: Dict[str, Any]) -> InsertAck:
        return await self._insert(db, payload)

    async def delete_order(self, db: AsyncDatabase, order_id: str) -> DeleteAck:
        oid = parse_object_id(order_id)
        result = await self._execute(
            "delete",
            self.collection(db).delete_one({"_id": oid}),
            {"order_id": order_id},
        )
        if result.deleted_count == 0:
            raise NotFoundError(resource="order", resource_id=order_id)
        logger.info("Deleted order %s", order_id)
        return delete_ack(result)

    async def update_status(
        self, db: AsyncDatabase, update: OrderStatusUpdate
    ) -> OrderStatusResult:
        """
        Set `status` on one order, leaving every other field unchanged.

        Raises:
            ValidationError: id or status missing, or id malformed (→ 400)
            NotFoundError: no order with this id (→ 404)
        """
        if update.status is None:
            raise ValidationError(message="'status' is required", field="status")
        oid = parse_object_id(update.id)

        result = await self._execute(
            "update",
            self.collection(db).update_one({"_id": oid}, {"$set": {"status": update.status}}),
            {"order_id": update.id},
        )
        if result.matched_count == 0:
            raise NotFoundError(resource="order", resource_id=update.id)
        logger.info("Order %s status set to %r", update.id, update.status)
        return OrderStatusResult(updated=True)


order_service = OrderService()
