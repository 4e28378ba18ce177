from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError
from core.dependencies import get_mongo
from core.exceptions import AppException
from db.db_operation import MongoConnection
from models.user import UserCreate, UserLogin
from services.user_service import create_user, authenticate_user
from utils.logger import get_logger

logger = get_logger("AUTH_ROUTE")

router = APIRouter(prefix="/api", tags=["Authentication"])

@router.post("/signup")
async def signup(user: UserCreate, mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Attempting to sign up user: {user.username}")
    try:
        return await create_user(mongo, user)
    except AppException:
        raise
    except PyMongoError as e:
        logger.error(f"Database error during user signup: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to register user")
    except Exception as e:
        logger.exception(f"Unexpected error during user signup: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to register user")

@router.post("/login")
async def login(user: UserLogin, mongo: MongoConnection = Depends(get_mongo)):
    logger.info(f"Login attempt for: {user.username}")
    try:
        return await authenticate_user(mongo, user)
    except AppException:
        raise
    except Exception:
        logger.exception("Error during login")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed")
