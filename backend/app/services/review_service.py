"""Review service: customer reviews in the `review` collection (create and list only)."""

from typing import Any, Dict, List

from pymongo.asynchronous.database import AsyncDatabase

from app.database import REVIEWS_COLLECTION
from app.schemas.common import InsertAck
from app.services.repository import CollectionService


class ReviewService(CollectionService):
    collection_name = REVIEWS_COLLECTION
    resource = "review"

    async def list_reviews(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        return await self._find_all(db)

    async def create_review(self, db: AsyncDatabase, payload: Dict[str, Any]) -> InsertAck:
        return await self._insert(db, payload)


review_service = ReviewService()
