import uuid
from datetime import datetime
from types import SimpleNamespace

import mongomock_motor
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from store_catalog.main import app
from store_catalog.db.mongo_client import get_database
from store_catalog.db.repositories.store_product_repository import StoreProductRepository

SEEDED_AT = datetime(2024, 1, 1)

@pytest_asyncio.fixture
async def db():
    mock_client = mongomock_motor.AsyncMongoMockClient()
    test_db = mock_client[f"test_{uuid.uuid4().hex}"]
    await StoreProductRepository(test_db).ensure_indexes()

    app.dependency_overrides[get_database] = lambda: test_db
    yield test_db
    app.dependency_overrides.clear()

@pytest_asyncio.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest_asyncio.fixture
async def catalog(db):
    """Three products and three stores; no store products yet."""
    milk = {"_id": ObjectId(), "name": "Whole Milk 1L", "description": "Fresh whole milk",
            "category": "dairy", "images": ["milk.jpg"], "supplierId": ObjectId()}
    cheese = {"_id": ObjectId(), "name": "Cheddar Cheese", "description": "Aged cheddar",
              "category": "dairy", "images": ["cheddar.jpg"]}
    bread = {"_id": ObjectId(), "name": "Sourdough Bread", "description": "Baked daily",
             "category": "bakery", "images": []}
    north = {"_id": ObjectId(), "name": "North Market", "address": "1 North St"}
    south = {"_id": ObjectId(), "name": "South Market", "address": "9 South Rd"}
    east = {"_id": ObjectId(), "name": "East Corner"}

    await db["products"].insert_many([milk, cheese, bread])
    await db["stores"].insert_many([north, south, east])
    return SimpleNamespace(milk=milk, cheese=cheese, bread=bread, north=north, south=south, east=east)

@pytest_asyncio.fixture
async def add_store_product(db):
    """Insert a store product directly, bypassing the service."""
    async def _add(product, store, **fields):
        doc = {
            "productId": product["_id"] if isinstance(product, dict) else product,
            "storeId": store["_id"] if isinstance(store, dict) else store,
            "price": 1.0,
            "stock": 10,
            "isAvailable": True,
            "recommended": False,
            "discount": False,
            "storeSpecificImages": [],
            "createdAt": SEEDED_AT,
            "updatedAt": SEEDED_AT,
        }
        doc.update(fields)
        res = await db["storeproducts"].insert_one(doc)
        return str(res.inserted_id)
    return _add
