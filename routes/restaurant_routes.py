# routes/restaurant_routes.py
from fastapi import APIRouter, Depends, HTTPException, status, Query, Body, Path
from typing import List
from core.dependencies import get_mongo
from core.exceptions import AppException
from db.db_operation import MongoConnection
from models.restaurant import RestaurantSignup, RestaurantLogin, RestaurantCreate, RestaurantOut
from services.restaurant_service import (
    register_restaurant, authenticate_restaurant, add_restaurant, get_restaurant_by_id, list_restaurants
)
from utils.logger import get_logger

logger = get_logger("Restaurant_Route")
router = APIRouter(prefix="/api", tags=["Restaurants"])

@router.post("/restaurant/signup")
async def api_restaurant_signup(payload: RestaurantSignup = Body(...), mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Restaurant signup attempt: {payload.name}")
    try:
        return await register_restaurant(mongo, payload)
    except AppException:
        raise
    except Exception:
        logger.exception("Error registering restaurant")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to register restaurant")

@router.post("/restaurant/login")
async def api_restaurant_login(payload: RestaurantLogin = Body(...), mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Restaurant login attempt: {payload.name}")
    try:
        return await authenticate_restaurant(mongo, payload)
    except AppException:
        raise
    except Exception:
        logger.exception("Error during restaurant login")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed")

# Superuser only: checked against the userId in the body
@router.post("/restaurant")
async def api_add_restaurant(payload: RestaurantCreate = Body(...), mongo: MongoConnection = Depends(get_mongo)):
    try:
        return await add_restaurant(mongo, payload)
    except AppException:
        raise
    except Exception:
        logger.exception("Error adding restaurant")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add a restaurant")

# Public: list restaurants with their menus
@router.get("/restaurants", response_model=List[RestaurantOut])
async def api_list_restaurants(skip: int = Query(0, ge=0), limit: int = Query(50, ge=1, le=200),
                               mongo: MongoConnection = Depends(get_mongo)):
    try:
        return await list_restaurants(mongo, skip=skip, limit=limit)
    except Exception:
        logger.exception("Error listing restaurants")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to list restaurants")

@router.get("/restaurant/{restaurant_id}", response_model=RestaurantOut)
async def api_get_restaurant(restaurant_id: str = Path(...), mongo: MongoConnection = Depends(get_mongo)):
    try:
        return await get_restaurant_by_id(mongo, restaurant_id)
    except AppException:
        raise
    except Exception:
        logger.exception("Error fetching restaurant")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch restaurant")
