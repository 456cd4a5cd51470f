"""Request schemas for the products collection."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# Fields PUT /updateProduct is allowed to change
EDITABLE_PRODUCT_FIELDS = ("name", "img", "description", "price")


class ProductUpdate(BaseModel):
    """
    What:  Body of PUT /updateProduct.
    How:   `id` selects the product; every other field that is present is `$set`.
           Fields left out (or null) are not touched. Values are stored as
           sent, like the documents POST /products creates.

    Why everything is optional:
        Missing `id` is reported as a 400 validation error by the service,
        before the database is contacted, rather than as a schema error.
    """
    id: Optional[str] = Field(default=None, description="Product id (24 hex characters)")
    name: Any = None
    img: Any = None
    description: Any = None
    price: Any = Field(default=None, description="Unit price, stored as sent")

    def changes(self) -> Dict[str, Any]:
        """The `$set` document: provided editable fields only."""
        values = self.model_dump(include=set(EDITABLE_PRODUCT_FIELDS), exclude_none=True)
        return {field: values[field] for field in EDITABLE_PRODUCT_FIELDS if field in values}
