from passlib.context import CryptContext
from utils.logger import get_logger

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

logger = get_logger("HASH_UTILS")

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72

def _truncate(password: str) -> str:
    raw = str(password).encode("utf-8")
    if len(raw) <= BCRYPT_MAX_BYTES:
        return str(password)
    return raw[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    logger.debug("Password received for hashing")
    return pwd_context.hash(_truncate(password))

def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(_truncate(plain_password), hashed_password)
