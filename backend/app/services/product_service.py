"""
Mobile Bazar Backend — Product Service
========================================

What:  Catalogue operations on the `products` collection.
Who:   Called by the products route handlers.

Operations (one driver call each):
    list_products   → find({})
    get_product     → find_one({_id})
    create_product  → insert_one(payload)
    update_product  → update_one({_id}, {$set: provided fields})
    delete_product  → delete_one({_id})
"""

import logging
from typing import Any, Dict, List

from pymongo.asynchronous.database import AsyncDatabase

from app.database import PRODUCTS_COLLECTION
from app.exceptions import NotFoundError, ValidationError
from app.schemas.common import DeleteAck, InsertAck, UpdateAck
from app.schemas.product import EDITABLE_PRODUCT_FIELDS, ProductUpdate
from app.services.repository import (
    CollectionService,
    delete_ack,
    parse_object_id,
    serialize_document,
    update_ack,
)

logger = logging.getLogger(__name__)


class ProductService(CollectionService):
    """Business logic layer for product operations."""

    collection_name = PRODUCTS_COLLECTION
    resource = "product"

    async def list_products(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        return await self._find_all(db)

    async def get_product(self, db: AsyncDatabase, product_id: str) -> Dict[str, Any]:
        """
        Retrieve a single product by id.

        Raises:
            ValidationError: malformed id (→ 400)
            NotFoundError: no product with this id (→ 404)
            DatabaseError: query failed (→ 500)
        """
        oid = parse_object_id(product_id)
        document = await self._execute(
            "read",
            self.collection(db).find_one({"_id": oid}),
            {"product_id": product_id},
        )
        if document is None:
            raise NotFoundError(resource="product", resource_id=product_id)
        return serialize_document(document)

    async def create_product(self, db: AsyncDatabase, payload: Dict[str, Any]) -> InsertAck:
        return await self._insert(db, payload)

    async def update_product(self, db: AsyncDatabase, update: ProductUpdate) -> UpdateAck:
        """
        Set the provided name/img/description/price on an existing product.

        Fields that are not provided keep their stored values; fields outside
        the editable set are never written.

        Raises:
            ValidationError: missing/malformed id, or nothing to update (→ 400)
            NotFoundError: the id matched no product (→ 404)
        """
        oid = parse_object_id(update.id)
        changes = update.changes()
        if not changes:
            raise ValidationError(
                message="Provide at least one of: " + ", ".join(EDITABLE_PRODUCT_FIELDS),
                context={"allowed_fields": list(EDITABLE_PRODUCT_FIELDS)},
            )

        logger.info("Updating product %s fields: %s", update.id, sorted(changes))
        result = await self._execute(
            "update",
            self.collection(db).update_one({"_id": oid}, {"$set": changes}),
            {"product_id": update.id},
        )
        if result.matched_count == 0:
            raise NotFoundError(resource="product", resource_id=update.id)
        return update_ack(result)

    async def delete_product(self, db: AsyncDatabase, product_id: str) -> DeleteAck:
        oid = parse_object_id(product_id)
        result = await self._execute(
            "delete",
            self.collection(db).delete_one({"_id": oid}),
            {"product_id": product_id},
        )
        if result.deleted_count == 0:
            raise NotFoundError(resource="product", resource_id=product_id)
        logger.info("Deleted product %s", product_id)
        return delete_ack(result)


product_service = ProductService()
