from fastapi.concurrency import run_in_threadpool
from pymongo.errors import DuplicateKeyError
from bson import ObjectId
from db.db_operation import MongoConnection
from core.exceptions import ConflictError, UnauthorizedError
from models.user import UserCreate, UserInDB, UserLogin
from utils.hash import hash_password, verify_password
from utils.jwt_handler import create_user_token
from utils.logger import get_logger

logger = get_logger("USER_SERVICE")

async def create_user(mongo: MongoConnection, user: UserCreate):
    logger.info(f"User create request received for username: {user.username}")
    users_collection = mongo.users_collection
    existing = await users_collection.find_one({"$or": [{"username": user.username}, {"email": user.email}]})
    if existing:
        logger.warning(f"Signup rejected, username or email in use: {user.username}")
        raise ConflictError("Username or email already in use")

    hashed = await run_in_threadpool(hash_password, user.password)
    user_doc = UserInDB(username=user.username, email=user.email, password=hashed).model_dump()
    try:
        result = await users_collection.insert_one(user_doc)
    except DuplicateKeyError:
        # lost a race with a concurrent signup
        logger.warning(f"Duplicate key on user insert: {user.username}")
        raise ConflictError("Username or email already in use")
    logger.info(f"User inserted into database with id: {result.inserted_id}")
    return {"message": "User registration successful"}

async def authenticate_user(mongo: MongoConnection, credentials: UserLogin):
    """
    Check username/password and issue a user token.
    A missing user and a wrong password produce the same error.
    """
    db_user = await mongo.users_collection.find_one({"username": credentials.username})
    if not db_user:
        logger.warning(f"Login failed: user not found {credentials.username}")
        raise UnauthorizedError("Invalid username or password")

    matched = await run_in_threadpool(verify_password, credentials.password, db_user.get("password"))
    if not matched:
        logger.warning(f"Login failed: wrong password {credentials.username}")
        raise UnauthorizedError("Invalid username or password")

    token = create_user_token(str(db_user["_id"]))
    logger.info(f"Login successful: {credentials.username}")
    return {"message": "Login successful", "token": token}

async def get_user_by_id(mongo: MongoConnection, user_id: str):
    if not user_id or not ObjectId.is_valid(user_id):
        return None
    return await mongo.users_collection.find_one({"_id": ObjectId(user_id)}, {"password": 0})
