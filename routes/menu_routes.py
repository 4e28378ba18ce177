from fastapi import APIRouter, Depends, HTTPException, status, Body
from typing import Optional
from core.dependencies import get_mongo, get_token_restaurant_id
from core.exceptions import AppException
from db.db_operation import MongoConnection
from models.menu import MenuUpdateRequest, MenuItemDeleteRequest
from services.menu_service import update_menu, delete_menu_item
from utils.logger import get_logger

logger = get_logger("Menu_Route")
router = APIRouter(prefix="/api", tags=["Menu"])

# Superuser, owning user, or the restaurant's own token
@router.put("/update-menu/{restaurant_id}")
async def api_update_menu(restaurant_id: str, payload: MenuUpdateRequest = Body(...),
                          token_restaurant_id: Optional[str] = Depends(get_token_restaurant_id),
                          mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Menu update requested for restaurant {restaurant_id}")
    try:
        return await update_menu(mongo, restaurant_id, payload.user_id, payload.menu, token_restaurant_id)
    except AppException:
        raise
    except Exception:
        logger.exception("Error updating menu")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update the menu")

@router.delete("/delete-menu-item/{restaurant_id}/{item_id}")
async def api_delete_menu_item(restaurant_id: str, item_id: str, payload: Optional[MenuItemDeleteRequest] = Body(None),
                               token_restaurant_id: Optional[str] = Depends(get_token_restaurant_id),
                               mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Menu item {item_id} delete requested for restaurant {restaurant_id}")
    try:
        user_id = payload.user_id if payload else None
        return await delete_menu_item(mongo, restaurant_id, item_id, user_id, token_restaurant_id)
    except AppException:
        raise
    except Exception:
        logger.exception("Error deleting menu item")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete the menu item")
