"""Review route handlers: POST /review and GET /review."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.database import get_database
from app.schemas.common import InsertAck
from app.services.review_service import review_service

router = APIRouter(tags=["Reviews"])


@router.post("/review", status_code=201, response_model=InsertAck, summary="Post a review")
async def create_review(
    payload: Dict[str, Any] = Body(..., description="Review document"),
    db: AsyncDatabase = Depends(get_database),
) -> InsertAck:
    return await review_service.create_review(db, payload)


@router.get("/review", response_model=List[Dict[str, Any]], summary="List all reviews")
async def list_reviews(db: AsyncDatabase = Depends(get_database)) -> List[Dict[str, Any]]:
    return await review_service.list_reviews(db)
