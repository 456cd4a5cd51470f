"""
Mobile Bazar Backend — Product Service Unit Tests
===================================================

What:  ProductService against a mocked collection (no real database).

What we test:
    ✅ Malformed and missing ids are rejected before the driver is called
    ✅ Missing products raise NotFoundError
    ✅ Updates $set only the provided editable fields
    ✅ Driver failures become DatabaseError
"""

import pytest
from bson import Decimal128, ObjectId
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.schemas.product import ProductUpdate
from app.services.product_service import ProductService
from app.services.repository import serialize_document


class TestProductServiceRead:

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_get_product_serializes_id(self, mock_db, mock_collection):
        oid = ObjectId()
        mock_collection.find_one.return_value = {"_id": oid, "name": "Pixel 7", "price": 599}

        result = await self.service.get_product(mock_db, str(oid))

        assert result == {"_id": str(oid), "name": "Pixel 7", "price": 599}
        mock_collection.find_one.assert_awaited_once_with({"_id": oid})
        mock_db.__getitem__.assert_called_with("products")

    @pytest.mark.asyncio
    async def test_get_product_not_found(self, mock_db, mock_collection):
        mock_collection.find_one.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.get_product(mock_db, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_get_product_malformed_id(self, mock_db, mock_collection):
        with pytest.raises(ValidationError, match="not a valid document id"):
            await self.service.get_product(mock_db, "not-an-id")
        mock_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_products_wraps_driver_errors(self, mock_db, mock_collection):
        mock_collection.find.return_value.to_list.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_products(mock_db)

        assert exc_info.value.context["collection"] == "products"
        assert exc_info.value.context["error_type"] == "ServerSelectionTimeoutError"


class TestProductServiceWrite:

    def setup_method(self):
        self.service = ProductService()

    @pytest.mark.asyncio
    async def test_create_product_does_not_mutate_payload(self, mock_db, mock_collection, sample_product):
        oid = ObjectId()
        mock_collection.insert_one.return_value = InsertOneResult(oid, True)

        ack = await self.service.create_product(mock_db, sample_product)

        assert ack.inserted_id == str(oid)
        assert "_id" not in sample_product

    @pytest.mark.asyncio
    async def test_update_sets_only_provided_fields(self, mock_db, mock_collection):
        oid = ObjectId()
        mock_collection.update_one.return_value = UpdateResult({"n": 1, "nModified": 1}, True)

        ack = await self.service.update_product(
            mock_db, ProductUpdate(id=str(oid), name="Pixel 8", price=699)
        )

        mock_collection.update_one.assert_awaited_once_with(
            {"_id": oid}, {"$set": {"name": "Pixel 8", "price": 699}}
        )
        assert ack.matched_count == 1
        assert ack.modified_count == 1

    @pytest.mark.asyncio
    async def test_update_requires_id(self, mock_db, mock_collection):
        with pytest.raises(ValidationError, match="'id' is required"):
            await self.service.update_product(mock_db, ProductUpdate(name="Pixel 8"))
        mock_collection.update_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_with_nothing_to_change(self, mock_db, mock_collection):
        with pytest.raises(ValidationError, match="at least one"):
            await self.service.update_product(mock_db, ProductUpdate(id=str(ObjectId())))
        mock_collection.update_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_unknown_product(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = UpdateResult({"n": 0, "nModified": 0}, True)

        with pytest.raises(NotFoundError):
            await self.service.update_product(
                mock_db, ProductUpdate(id=str(ObjectId()), description="new")
            )

    @pytest.mark.asyncio
    async def test_delete_nothing_deleted_is_not_found(self, mock_db, mock_collection):
        mock_collection.delete_one.return_value = DeleteResult({"n": 0}, True)

        with pytest.raises(NotFoundError):
            await self.service.delete_product(mock_db, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_delete_product(self, mock_db, mock_collection):
        mock_collection.delete_one.return_value = DeleteResult({"n": 1}, True)

        ack = await self.service.delete_product(mock_db, str(ObjectId()))

        assert ack.deleted_count == 1
        assert ack.model_dump(by_alias=True) == {"acknowledged": True, "deletedCount": 1}


class TestDocumentSerialization:

    def test_nested_bson_values_become_strings(self):
        oid, ref = ObjectId(), ObjectId()
        document = {
            "_id": oid,
            "price": Decimal128("799.99"),
            "variants": [{"ref": ref, "colors": ["black"]}],
        }

        assert serialize_document(document) == {
            "_id": str(oid),
            "price": "799.99",
            "variants": [{"ref": str(ref), "colors": ["black"]}],
        }
