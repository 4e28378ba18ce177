"""Tests for restaurant signup, login, creation and reads."""

import pytest
from jose import jwt

from settings.config import settings

RESTAURANT = {
    "name": "Sushi Bar",
    "password": "sushipw",
    "description": "Rolls",
    "location": "Harbor",
    "menu": [{"foodItem": "Maki", "price": 8, "type": "roll", "itemImage": "http://img/maki.png"}],
}


class TestRestaurantSignup:

    @pytest.mark.asyncio
    async def test_signup_stores_hashed_password_and_menu(self, client, mongo):
        response = await client.post("/api/restaurant/signup", json=RESTAURANT)

        assert response.status_code == 200
        assert response.json() == {"message": "Restaurant registration successful"}
        stored = await mongo.restaurants_collection.find_one({"name": "Sushi Bar"})
        assert stored["password"] != "sushipw"
        assert len(stored["menu"]) == 1
        assert stored["menu"][0]["foodItem"] == "Maki"
        assert stored["menu"][0]["_id"] is not None

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, client, mongo):
        await client.post("/api/restaurant/signup", json=RESTAURANT)

        response = await client.post("/api/restaurant/signup", json=RESTAURANT)

        assert response.status_code == 400
        assert await mongo.restaurants_collection.count_documents({"name": "Sushi Bar"}) == 1


class TestRestaurantLogin:

    @pytest.mark.asyncio
    async def test_login_token_carries_restaurant_id(self, client, mongo):
        await client.post("/api/restaurant/signup", json=RESTAURANT)
        stored = await mongo.restaurants_collection.find_one({"name": "Sushi Bar"})

        response = await client.post("/api/restaurant/login", json={"name": "Sushi Bar", "password": "sushipw"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Restaurant login successful"
        payload = jwt.decode(body["token"], settings.RESTAURANT_TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert payload["restaurantId"] == str(stored["_id"])
        assert payload["exp"] - payload["iat"] == 60 * 60

    @pytest.mark.asyncio
    async def test_wrong_password(self, client):
        await client.post("/api/restaurant/signup", json=RESTAURANT)

        response = await client.post("/api/restaurant/login", json={"name": "Sushi Bar", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid restaurant name or password"}

    @pytest.mark.asyncio
    async def test_unknown_restaurant(self, client):
        response = await client.post("/api/restaurant/login", json={"name": "Ghost", "password": "x"})

        assert response.status_code == 401


class TestAddRestaurant:

    @pytest.mark.asyncio
    async def test_superuser_can_add(self, client, mongo, superuser_id, make_user):
        owner_id = await make_user("owner", "owner@x.com")
        response = await client.post("/api/restaurant", json={
            "userId": superuser_id,
            "name": "Taco Truck",
            "description": "Tacos",
            "location": "Corner",
            "menu": [],
            "ownerId": owner_id,
        })

        assert response.status_code == 200
        assert response.json() == {"message": "Restaurant added successfully"}
        stored = await mongo.restaurants_collection.find_one({"name": "Taco Truck"})
        assert stored["owner_id"] == owner_id
        assert stored["password"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner_id", ["6561f0c2a1b2c3d4e5f60718", "garbage"])
    async def test_unknown_owner_rejected(self, client, mongo, superuser_id, owner_id):
        response = await client.post("/api/restaurant", json={
            "userId": superuser_id, "name": "Taco Truck", "description": "Tacos", "location": "Corner",
            "ownerId": owner_id,
        })

        assert response.status_code == 400
        assert response.json() == {"error": "Owner not found"}
        assert await mongo.restaurants_collection.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_restaurant_without_password_cannot_log_in(self, client, superuser_id):
        await client.post("/api/restaurant", json={
            "userId": superuser_id, "name": "Taco Truck", "description": "Tacos", "location": "Corner",
        })

        response = await client.post("/api/restaurant/login", json={"name": "Taco Truck", "password": ""})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_added_restaurant_with_password_can_log_in(self, client, superuser_id):
        await client.post("/api/restaurant", json={
            "userId": superuser_id, "name": "Taco Truck", "description": "Tacos", "location": "Corner",
            "password": "tacopw",
        })

        response = await client.post("/api/restaurant/login", json={"name": "Taco Truck", "password": "tacopw"})

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_regular_user_forbidden(self, client, mongo, make_user):
        user_id = await make_user("alice", "a@x.com")

        response = await client.post("/api/restaurant", json={
            "userId": user_id, "name": "Taco Truck", "description": "Tacos", "location": "Corner", "menu": [],
        })

        assert response.status_code == 403
        assert response.json() == {"error": "Unauthorized access"}
        assert await mongo.restaurants_collection.count_documents({}) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["6561f0c2a1b2c3d4e5f60718", "not-an-id"])
    async def test_unknown_user_forbidden(self, client, user_id):
        response = await client.post("/api/restaurant", json={
            "userId": user_id, "name": "Taco Truck", "description": "Tacos", "location": "Corner",
        })

        assert response.status_code == 403


class TestRestaurantReads:

    @pytest.mark.asyncio
    async def test_get_restaurant_hides_password(self, client, restaurant_id):
        response = await client.get(f"/api/restaurant/{restaurant_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == restaurant_id
        assert body["name"] == "Pasta Place"
        assert "password" not in body
        assert [m["foodItem"] for m in body["menu"]] == ["Carbonara", "Tiramisu"]
        assert all(m["_id"] for m in body["menu"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing_id", ["6561f0c2a1b2c3d4e5f60718", "garbage"])
    async def test_get_missing_restaurant(self, client, missing_id):
        response = await client.get(f"/api/restaurant/{missing_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Restaurant not found"}

    @pytest.mark.asyncio
    async def test_list_restaurants(self, client, restaurant_id):
        await client.post("/api/restaurant/signup", json=RESTAURANT)

        response = await client.get("/api/restaurants")

        assert response.status_code == 200
        names = [r["name"] for r in response.json()]
        assert names == ["Pasta Place", "Sushi Bar"]
