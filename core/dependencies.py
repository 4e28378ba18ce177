from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from db.db_operation import MongoConnection
from utils.jwt_handler import decode_restaurant_token
from utils.logger import get_logger

logger = get_logger("Dependencies")

# optional: menu routes also accept a restaurant's own login token
restaurant_bearer = HTTPBearer(auto_error=False)

def get_mongo(request: Request) -> MongoConnection:
    """The MongoConnection opened at startup and kept on app.state."""
    mongo = getattr(request.app.state, "mongo", None)
    if mongo is None:
        logger.error("No MongoDB connection on app state")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database unavailable")
    return mongo

async def get_token_restaurant_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(restaurant_bearer)
) -> Optional[str]:
    """
    Restaurant id carried by a restaurant bearer token, or None when the
    request has no Authorization header. A present but invalid token is a 401.
    """
    if credentials is None:
        return None
    try:
        payload = decode_restaurant_token(credentials.credentials)
    except ValueError:
        logger.error("JWT Error: Invalid restaurant token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    restaurant_id = payload.get("restaurantId")
    if restaurant_id is None:
        logger.debug("restaurantId not found in token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token: no restaurant id found")
    return restaurant_id
