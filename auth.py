from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pydantic import BaseModel
from manager import EventManager
from seed import seed_demo_data
from datetime import datetime, timedelta, UTC
import config

manager = EventManager()
if config.SEED_DEMO_DATA:
    seed_demo_data(manager)

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login")

class TokenData(BaseModel):
    user_id: int

def create_access_token(data: dict):
    """Create a JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(UTC) + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)

def create_refresh_token(data: dict):
    """Create a JWT refresh token."""
    to_encode = data.copy()
    expire = datetime.now(UTC) + timedelta(days=config.REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": expire, "type": "refresh"})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)

def decode_token(token: str, token_type: str) -> TokenData:
    """Decode a JWT of the given type, raising 401 when it is not valid."""
    credentials_exception = HTTPException(
        status_code=401,
        detail=f"Invalid or expired {token_type} token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError:
        raise credentials_exception
    subject = payload.get("sub")
    if subject is None or not subject.isdigit() or payload.get("type") != token_type:
        raise credentials_exception
    return TokenData(user_id=int(subject))

async def get_current_user(token: str = Depends(oauth2_scheme)):
    """Retrieve the current authenticated user from a JWT token."""
    token_data = decode_token(token, "access")
    user = manager.get_user_by_id(token_data.user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")
    return user
