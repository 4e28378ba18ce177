from datetime import datetime, timedelta
from jose import jwt, JWTError
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("JWT_HANDLER")

ALGORITHM = settings.JWT_ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

def create_access_token(data: dict, secret_key: str, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES):
    """
    Creates JWT token with expiry.
    """
    logger.info("Access token creation requested")
    to_encode = data.copy()
    now = datetime.utcnow()
    expire = now + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire, "iat": now})
    encoded_jwt = jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)
    logger.info(f"Access token created successfully with expiry {expire}")
    return encoded_jwt

def decode_access_token(token: str, secret_key: str):
    """
    Decode JWT token and return payload.
    Raises ValueError if invalid or expired.
    """
    logger.info("Decoding access token")
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
        logger.info("Token decoded successfully")
        return payload
    except JWTError as e:
        logger.warning(f"Token rejected: {e}")
        raise ValueError("Invalid token")

def create_user_token(user_id: str):
    return create_access_token({"userId": user_id}, settings.USER_TOKEN_SECRET)

def create_restaurant_token(restaurant_id: str):
    return create_access_token({"restaurantId": restaurant_id}, settings.RESTAURANT_TOKEN_SECRET)

def decode_restaurant_token(token: str):
    return decode_access_token(token, settings.RESTAURANT_TOKEN_SECRET)
