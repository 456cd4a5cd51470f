"""
Mobile Bazar Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db: MagicMock database whose collection methods are AsyncMocks
    ├── mock_collection: the collection returned by mock_db[...]
    ├── fake_db: In-memory stand-in for a MongoDB database (filters by equality,
    │            supports $set and upsert) returning real pymongo result objects
    └── test_client: HTTPX AsyncClient for the app, with get_database → fake_db
"""

import copy
import os
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["DB_CONNECT_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


# ══════════════════════════════════════════════════════════════════════════
# In-memory collection double
# ══════════════════════════════════════════════════════════════════════════

def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = [copy.deepcopy(doc) for doc in self._documents]
        return documents if length is None else documents[:length]


class FakeCollection:
    """The subset of AsyncCollection the services use."""

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        return FakeCursor([doc for doc in self.documents if _matches(doc, query or {})])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.documents:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(
        self, query: Dict[str, Any], update: Dict[str, Any], upsert: bool = False
    ) -> UpdateResult:
        changes = update.get("$set", {})
        for doc in self.documents:
            if _matches(doc, query):
                before = copy.deepcopy(doc)
                doc.update(copy.deepcopy(changes))
                return UpdateResult({"n": 1, "nModified": int(doc != before)}, True)
        if upsert:
            doc = {**query, **copy.deepcopy(changes), "_id": ObjectId()}
            self.documents.append(doc)
            return UpdateResult({"n": 1, "nModified": 0, "upserted": doc["_id"]}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        for index, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)


class FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_collection():
    """
    A MagicMock collection with AsyncMock driver methods.

    Usage:
        async def test_get(mock_db, mock_collection):
            mock_collection.find_one.return_value = {"_id": oid, "name": "Pixel"}
    """
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__.return_value = mock_collection
    return db


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def sample_product():
    return {
        "name": "Galaxy S21",
        "img": "https://i.ibb.co/s21.png",
        "description": "6.2 inch display, 8GB RAM",
        "price": 799,
    }


@pytest_asyncio.fixture
async def test_client(fake_db):
    """
    Async HTTP client talking to the app through ASGITransport.

    Usage:
        async def test_reviews(test_client):
            response = await test_client.get("/review")
            assert response.status_code == 200
    """
    from app.database import get_database
    from app.main import app

    app.dependency_overrides[get_database] = lambda: fake_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
