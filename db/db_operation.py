from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("DB_OPERATION")


class MongoConnection:
    """
    Owns the Mongo client and the two collections the API works against.
    One instance is created at startup and handed to routes through
    core.dependencies.get_mongo; tests pass an in-memory client instead.
    """

    def __init__(self, mongo_uri: str = None, db_name: str = None, client=None):
        logger.info("Initializing MongoDB Connection")
        self.client = client if client is not None else AsyncIOMotorClient(mongo_uri or settings.MONGO_URI)
        self.db_name = db_name or settings.DB_NAME
        self.db = self.client[self.db_name]
        self.users_collection = self.db["users"]
        self.restaurants_collection = self.db["restaurants"]

    async def connect(self):
        try:
            # Force an actual connection & authentication check
            await self.db.command("ping")
            logger.info("Successfully connected to MongoDB")
            logger.info(f"Using Database: {self.db_name}")
            logger.info(f"Collections ready: {self.users_collection.name}, {self.restaurants_collection.name}")
        except Exception as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            raise

    async def create_indexes(self):
        await self.users_collection.create_index([("username", ASCENDING)], unique=True)
        await self.users_collection.create_index([("email", ASCENDING)], unique=True)
        await self.restaurants_collection.create_index([("name", ASCENDING)], unique=True)
        logger.info("Indexes created")

    def close(self):
        self.client.close()
        logger.info("MongoDB connection closed")
