# services/restaurant_service.py
from fastapi.concurrency import run_in_threadpool
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError
from db.db_operation import MongoConnection
from core.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError, UnauthorizedError
from services.user_service import get_user_by_id
from utils.hash import hash_password, verify_password
from utils.jwt_handler import create_restaurant_token
from utils.logger import get_logger

logger = get_logger("Restaurant_Service")

def build_menu(items) -> list:
    """
    Turn incoming MenuItemIn models into stored sub-documents.
    Items keep a valid `_id` they were sent with unless an earlier item in the
    same menu already uses it; everything else gets a new one.
    """
    menu = []
    seen = set()
    for item in items or []:
        oid = ObjectId(item.id) if item.id and ObjectId.is_valid(item.id) else ObjectId()
        if oid in seen:
            oid = ObjectId()
        seen.add(oid)
        menu.append({
            "_id": oid,
            "foodItem": item.food_item,
            "price": item.price,
            "type": item.type,
            "itemImage": item.item_image
        })
    return menu

def serialize_menu(menu: list) -> list:
    return [
        {
            "_id": str(m["_id"]),
            "foodItem": m.get("foodItem"),
            "price": m.get("price"),
            "type": m.get("type"),
            "itemImage": m.get("itemImage")
        } for m in menu
    ]

def serialize_restaurant(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "description": doc.get("description"),
        "location": doc.get("location"),
        "ownerId": doc.get("owner_id"),
        "menu": serialize_menu(doc.get("menu", []))
    }

async def _insert_restaurant(mongo: MongoConnection, name: str, description: str, location: str,
                             menu: list, hashed_password: str | None, owner_id: str | None = None):
    restaurants = mongo.restaurants_collection
    if await restaurants.find_one({"name": name}) is not None:
        logger.warning(f"Restaurant name already taken: {name}")
        raise ConflictError("Restaurant name already in use")
    doc = {
        "name": name,
        "description": description,
        "location": location,
        "password": hashed_password,
        "owner_id": owner_id,
        "menu": build_menu(menu)
    }
    try:
        result = await restaurants.insert_one(doc)
    except DuplicateKeyError:
        raise ConflictError("Restaurant name already in use")
    except PyMongoError:
        logger.exception("DB error creating restaurant")
        raise
    logger.info("Restaurant created", extra={"restaurant_id": str(result.inserted_id)})
    return result.inserted_id

async def register_restaurant(mongo: MongoConnection, payload):
    """Public restaurant signup. The password is required and stored hashed."""
    logger.info(f"Restaurant signup request received for: {payload.name}")
    hashed = await run_in_threadpool(hash_password, payload.password)
    await _insert_restaurant(mongo, payload.name, payload.description, payload.location, payload.menu, hashed)
    return {"message": "Restaurant registration successful"}

async def authenticate_restaurant(mongo: MongoConnection, credentials):
    restaurant = await mongo.restaurants_collection.find_one({"name": credentials.name})
    if not restaurant:
        logger.warning(f"Restaurant login failed: not found {credentials.name}")
        raise UnauthorizedError("Invalid restaurant name or password")

    matched = await run_in_threadpool(verify_password, credentials.password, restaurant.get("password"))
    if not matched:
        logger.warning(f"Restaurant login failed: wrong password {credentials.name}")
        raise UnauthorizedError("Invalid restaurant name or password")

    token = create_restaurant_token(str(restaurant["_id"]))
    logger.info(f"Restaurant login successful: {credentials.name}")
    return {"message": "Restaurant login successful", "token": token}

async def add_restaurant(mongo: MongoConnection, payload):
    """
    Create a restaurant on behalf of a superuser. `password` and `owner_id`
    are optional; a restaurant stored without a password cannot log in.
    """
    user = await get_user_by_id(mongo, payload.user_id)
    if not user or not user.get("superuser", False):
        logger.warning(f"Forbidden: {payload.user_id} tried to add a restaurant")
        raise ForbiddenError()

    if payload.owner_id is not None and not await get_user_by_id(mongo, payload.owner_id):
        logger.warning(f"Unknown owner {payload.owner_id} for restaurant {payload.name}")
        raise BadRequestError("Owner not found")

    hashed = None
    if payload.password:
        hashed = await run_in_threadpool(hash_password, payload.password)
    await _insert_restaurant(mongo, payload.name, payload.description, payload.location,
                             payload.menu, hashed, owner_id=payload.owner_id)
    logger.info(f"Restaurant {payload.name} added by superuser {payload.user_id}")
    return {"message": "Restaurant added successfully"}

async def find_restaurant(mongo: MongoConnection, restaurant_id: str):
    """Raw restaurant document, or None for unknown or malformed ids."""
    if not ObjectId.is_valid(restaurant_id):
        return None
    return await mongo.restaurants_collection.find_one({"_id": ObjectId(restaurant_id)})

async def get_restaurant_by_id(mongo: MongoConnection, restaurant_id: str):
    doc = await find_restaurant(mongo, restaurant_id)
    if not doc:
        raise NotFoundError("Restaurant not found")
    return serialize_restaurant(doc)

async def list_restaurants(mongo: MongoConnection, skip: int = 0, limit: int = 50):
    cursor = mongo.restaurants_collection.find({}, {"password": 0}).sort("name", 1).skip(skip).limit(limit)
    docs = await cursor.to_list(length=limit)
    return [serialize_restaurant(d) for d in docs]
