import os

os.environ.setdefault("USER_TOKEN_SECRET", "test-user-secret")
os.environ.setdefault("RESTAURANT_TOKEN_SECRET", "test-restaurant-secret")

import httpx
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from db.db_operation import MongoConnection
from main import app
from scripts.seed_superuser import seed


@pytest_asyncio.fixture
async def mongo():
    """An in-memory database with the production indexes."""
    conn = MongoConnection(client=AsyncMongoMockClient(), db_name="food_delivery_test")
    await conn.create_indexes()
    return conn


@pytest_asyncio.fixture
async def client(mongo):
    app.state.mongo = mongo
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.state.mongo = None


@pytest_asyncio.fixture
async def superuser_id(mongo):
    return await seed(mongo, "root", "root@example.com", "rootpw")


@pytest_asyncio.fixture
async def restaurant_id(client, mongo):
    """A signed-up restaurant with two menu items."""
    response = await client.post("/api/restaurant/signup", json={
        "name": "Pasta Place",
        "password": "pastapw",
        "description": "Fresh pasta",
        "location": "Main St",
        "menu": [
            {"foodItem": "Carbonara", "price": 12.5, "type": "main", "itemImage": "http://img/carbonara.png"},
            {"foodItem": "Tiramisu", "price": 6, "type": "dessert", "itemImage": "http://img/tiramisu.png"},
        ],
    })
    assert response.status_code == 200
    doc = await mongo.restaurants_collection.find_one({"name": "Pasta Place"})
    return str(doc["_id"])


@pytest_asyncio.fixture
async def make_user(client, mongo):
    """Sign a user up through the API and return its id."""
    async def _make_user(username, email, password="pw"):
        response = await client.post("/api/signup", json={"username": username, "email": email, "password": password})
        assert response.status_code == 200
        doc = await mongo.users_collection.find_one({"username": username})
        return str(doc["_id"])
    return _make_user
