"""Request and response schemas for the orders collection."""

from typing import Optional

from pydantic import BaseModel, Field


class OrderStatusUpdate(BaseModel):
    """Body of PUT /updateOrderStatus. Only `status` is ever written."""
    id: Optional[str] = Field(default=None, description="Order id (24 hex characters)")
    status: Optional[str] = Field(default=None, description="Free-form status, e.g. 'Shipped'")


class OrderStatusResult(BaseModel):
    """Response of PUT /updateOrderStatus."""
    updated: bool = Field(description="Whether an existing order was updated")
