from bson import ObjectId
from db.db_operation import MongoConnection
from core.exceptions import ForbiddenError, NotFoundError
from services.restaurant_service import build_menu, find_restaurant
from services.user_service import get_user_by_id
from utils.logger import get_logger

logger = get_logger("Menu_Service")

async def authorize_menu_change(mongo: MongoConnection, restaurant_id: str, user_id: str | None,
                                token_restaurant_id: str | None = None):
    """
    Resolve the restaurant a menu change targets and check the caller may make it.

    Allowed callers: a superuser, the user recorded as the restaurant's owner,
    or the restaurant itself via its own bearer token. Returns the restaurant
    document.
    """
    user = await get_user_by_id(mongo, user_id)
    if not user and token_restaurant_id is None:
        logger.warning(f"Forbidden: unknown user {user_id} for restaurant {restaurant_id}")
        raise ForbiddenError()

    restaurant = await find_restaurant(mongo, restaurant_id)
    if not restaurant:
        logger.warning(f"Restaurant not found: {restaurant_id}")
        raise NotFoundError("Restaurant not found")

    if token_restaurant_id is not None and token_restaurant_id == str(restaurant["_id"]):
        return restaurant
    if user and user.get("superuser", False):
        return restaurant
    if user and restaurant.get("owner_id") == str(user["_id"]):
        return restaurant

    logger.warning(f"Forbidden: {user_id} does not own restaurant {restaurant_id}")
    raise ForbiddenError()

async def update_menu(mongo: MongoConnection, restaurant_id: str, user_id: str, items,
                      token_restaurant_id: str | None = None):
    """Replace the whole menu. Concurrent updates are last-write-wins."""
    restaurant = await authorize_menu_change(mongo, restaurant_id, user_id, token_restaurant_id)
    menu = build_menu(items)
    await mongo.restaurants_collection.update_one({"_id": restaurant["_id"]}, {"$set": {"menu": menu}})
    logger.info("Menu updated", extra={"restaurant_id": restaurant_id, "actor": user_id, "items": len(menu)})
    return {"message": "Menu updated successfully"}

async def delete_menu_item(mongo: MongoConnection, restaurant_id: str, item_id: str, user_id: str,
                           token_restaurant_id: str | None = None):
    restaurant = await authorize_menu_change(mongo, restaurant_id, user_id, token_restaurant_id)
    if not ObjectId.is_valid(item_id):
        raise NotFoundError("Menu item not found")
    oid = ObjectId(item_id)
    if not any(m.get("_id") == oid for m in restaurant.get("menu", [])):
        logger.warning(f"Menu item {item_id} not found in restaurant {restaurant_id}")
        raise NotFoundError("Menu item not found")

    await mongo.restaurants_collection.update_one({"_id": restaurant["_id"]}, {"$pull": {"menu": {"_id": oid}}})
    logger.info("Menu item deleted", extra={"actor": user_id, "item_id": item_id})
    return {"message": "Menu item deleted successfully"}
