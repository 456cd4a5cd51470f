"""
Mobile Bazar Backend — Collection Service Base
================================================

What:  Shared plumbing for the per-collection services.
How:   Each service names its collection; this base resolves it from the
       injected database, runs exactly one driver call per operation, and
       turns driver results into API-shaped values.

Error Handling Strategy:
    - Malformed ids are rejected with ValidationError before any driver call
    - PyMongoError from the driver is logged and re-raised as DatabaseError
      (generic message to the client, details in the server log)
    - Our own exceptions propagate untouched
"""

import logging
from typing import Any, Awaitable, Dict, List, Mapping, Optional, TypeVar

from bson import Decimal128, ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.exceptions import DatabaseError, ValidationError
from app.schemas.common import DeleteAck, InsertAck, UpdateAck

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_object_id(value: Optional[str], field: str = "id") -> ObjectId:
    """
    Convert a client-supplied id string into an ObjectId.

    Raises:
        ValidationError: value is missing or not 24 hex characters (→ 400)
    """
    if not value:
        raise ValidationError(message=f"'{field}' is required", field=field)
    if not ObjectId.is_valid(value):
        raise ValidationError(
            message=f"'{value}' is not a valid document id",
            field=field,
        )
    return ObjectId(value)


def _json_ready(value: Any) -> Any:
    if isinstance(value, (ObjectId, Decimal128)):
        return str(value)
    if isinstance(value, Mapping):
        return {key: _json_ready(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_ready(item) for item in value]
    return value


def serialize_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Render a stored document as JSON-ready data.

    ObjectId and Decimal128 values, at any depth, become their string form
    (`_id` included), so references such as `productId` serialize too.
    """
    return _json_ready(document)


def insert_ack(result: InsertOneResult) -> InsertAck:
    return InsertAck(
        acknowledged=result.acknowledged,
        inserted_id=str(result.inserted_id),
    )


def update_ack(result: UpdateResult) -> UpdateAck:
    upserted_id = result.upserted_id
    return UpdateAck(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count or 0,
        upserted_id=str(upserted_id) if upserted_id is not None else None,
        upserted_count=1 if upserted_id is not None else 0,
    )


def delete_ack(result: DeleteResult) -> DeleteAck:
    return DeleteAck(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class CollectionService:
    """
    Base class for services backed by a single collection.

    Subclasses set `collection_name` (the MongoDB collection) and `resource`
    (the word used in not-found messages).
    """

    collection_name: str = ""
    resource: str = "document"

    def collection(self, db: AsyncDatabase) -> AsyncCollection:
        return db[self.collection_name]

    async def _execute(
        self,
        operation: str,
        call: Awaitable[T],
        context: Optional[Dict[str, Any]] = None,
    ) -> T:
        """
        Await a single driver call, translating driver failures.

        Args:
            operation: Short name for logs (e.g. "insert", "delete")
            call: The pending driver coroutine
            context: Extra identifiers for the server-side log

        Raises:
            DatabaseError: the driver raised PyMongoError (→ 500)
        """
        try:
            return await call
        except PyMongoError as e:
            ctx = {"collection": self.collection_name, "operation": operation}
            ctx.update(context or {})
            logger.error(
                "Database error during %s on %s: %s",
                operation,
                self.collection_name,
                str(e),
            )
            raise DatabaseError(
                message=f"Could not {operation} {self.resource} data. Please try again.",
                context={**ctx, "error_type": type(e).__name__},
            ) from e

    async def _find_all(
        self,
        db: AsyncDatabase,
        query: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """Every document matching `query` (all documents when omitted)."""
        cursor = self.collection(db).find(query or {})
        documents = await self._execute("list", cursor.to_list(), {"filter": query or {}})
        return [serialize_document(doc) for doc in documents]

    async def _insert(self, db: AsyncDatabase, document: Dict[str, Any]) -> InsertAck:
        # insert_one adds `_id` to the dict it is given; keep the caller's copy clean
        payload = dict(document)
        result = await self._execute("insert", self.collection(db).insert_one(payload))
        logger.info("Inserted %s %s", self.resource, result.inserted_id)
        return insert_ack(result)
