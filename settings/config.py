from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Configuration settings for the application."""
    PROJECT_NAME: str = "Food Delivery API"
    MONGO_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "food_delivery_app"

    # token secrets have no defaults, they must come from the environment
    USER_TOKEN_SECRET: str
    RESTAURANT_TOKEN_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
