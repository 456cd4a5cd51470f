"""
Mobile Bazar Backend — Product Route Handlers
===============================================

What:  Catalogue endpoints backed by the `products` collection.
How:   Extracts path/body data, delegates to ProductService, returns JSON.
Who:   Called by the storefront (explore page, product detail, admin dashboard).

Routes:
    GET    /products         list every product
    GET    /products/{id}    one product
    POST   /products         add a product
    PUT    /updateProduct    edit name/img/description/price
    DELETE /products/{id}    remove a product
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from pymongo.asynchronous.database import AsyncDatabase

from app.database import get_database
from app.schemas.common import DeleteAck, ErrorResponse, InsertAck, UpdateAck
from app.schemas.product import ProductUpdate
from app.services.product_service import product_service

router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=List[Dict[str, Any]],
    summary="List all products",
)
async def list_products(db: AsyncDatabase = Depends(get_database)) -> List[Dict[str, Any]]:
    return await product_service.list_products(db)


@router.get(
    "/products/{product_id}",
    response_model=Dict[str, Any],
    responses={
        400: {"description": "Malformed product id", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Get a single product by id",
)
async def get_product(
    product_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> Dict[str, Any]:
    return await product_service.get_product(db, product_id)


@router.post(
    "/products",
    status_code=201,
    response_model=InsertAck,
    summary="Add a product",
    description="Stores the JSON object as sent; name, img, description and price are customary.",
)
async def create_product(
    payload: Dict[str, Any] = Body(..., description="Product document"),
    db: AsyncDatabase = Depends(get_database),
) -> InsertAck:
    return await product_service.create_product(db, payload)


@router.put(
    "/updateProduct",
    response_model=UpdateAck,
    responses={
        400: {"description": "Missing/malformed id or nothing to update", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Edit product fields",
)
async def update_product(
    update: ProductUpdate,
    db: AsyncDatabase = Depends(get_database),
) -> UpdateAck:
    """Only the provided fields among name, img, description and price change."""
    return await product_service.update_product(db, update)


@router.delete(
    "/products/{product_id}",
    response_model=DeleteAck,
    responses={
        400: {"description": "Malformed product id", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> DeleteAck:
    return await product_service.delete_product(db, product_id)
