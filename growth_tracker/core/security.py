# growth_tracker/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from growth_tracker.core.config import settings, get_db
from growth_tracker.core.exceptions import UnauthorizedError
from growth_tracker.crud.user import crud_user
from growth_tracker.models.user import User


# =====================================================================
# JWT TOKEN CONFIGURATION
# =====================================================================

# Missing headers are reported by get_current_user as 401, not by HTTPBearer.
security = HTTPBearer(auto_error=False)


# =====================================================================
# TOKEN CREATION
# =====================================================================

def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token.

    The payload carries the user id and username so clients can read them
    without an extra request.

    Args:
        user: Authenticated user
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT access token
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {
        "sub": str(user.id),
        "user_id": user.id,
        "username": user.username,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


# =====================================================================
# TOKEN VERIFICATION
# =====================================================================

def verify_access_token(token: str) -> int:
    """
    Verify JWT access token and return the user id.

    Raises:
        UnauthorizedError: If token is invalid, expired or of the wrong type
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    if payload.get("type") != "access":
        raise UnauthorizedError("Invalid token type. Expected access")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise UnauthorizedError("Could not validate credentials")


# =====================================================================
# USER AUTHENTICATION DEPENDENCIES
# =====================================================================

def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Get current authenticated user from the bearer token.

    Raises:
        UnauthorizedError: If the header is missing, the token is invalid,
            or the user no longer exists
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Missing bearer token")

    user_id = verify_access_token(credentials.credentials)

    user = crud_user.get(db, id=user_id)
    if user is None:
        raise UnauthorizedError("User not found")

    request.state.user_id = user.id
    return user
