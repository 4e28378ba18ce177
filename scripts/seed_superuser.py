# scripts/seed_superuser.py
import asyncio
import os
from db.db_operation import MongoConnection
from models.user import UserInDB
from utils.hash import hash_password
from utils.logger import setup_logging, get_logger

logger = get_logger("SEED_SUPERUSER")

async def seed(mongo: MongoConnection, username: str, email: str, password: str):
    """Create the indexes and a superuser account if the username is free."""
    await mongo.create_indexes()
    users = mongo.users_collection
    # documents written before `superuser` existed default to regular users
    await users.update_many({"superuser": {"$exists": False}}, {"$set": {"superuser": False}})

    existing = await users.find_one({"username": username})
    if existing:
        logger.info(f"Superuser {username} already exists")
        return str(existing["_id"])
    doc = UserInDB(username=username, email=email, password=hash_password(password), superuser=True).model_dump()
    result = await users.insert_one(doc)
    logger.info(f"Created superuser: {username} {result.inserted_id}")
    return str(result.inserted_id)

async def main():
    mongo = MongoConnection()
    try:
        await mongo.connect()
        await seed(
            mongo,
            os.getenv("SUPERUSER_USERNAME", "admin"),
            os.getenv("SUPERUSER_EMAIL", "admin@example.com"),
            os.environ["SUPERUSER_PASSWORD"]
        )
    finally:
        mongo.close()

if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
