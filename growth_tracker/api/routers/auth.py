# growth_tracker/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from growth_tracker.core.config import get_db
from growth_tracker.core.security import create_access_token
from growth_tracker.services.user import user_service
from growth_tracker.schemas.user import (
    LoginRequest,
    TokenResponse,
    UserCreate,
    SuccessResponse,
)

router = APIRouter(tags=["Authentication"])


# =====================================================================
# PUBLIC ENDPOINTS - No authentication required
# =====================================================================

@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account"
)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    - **email**: Valid email address
    - **username**: 3-50 characters, letters, digits, `_` and `.`
    - **password**: At least 8 characters
    """
    user_service.register_user(db, user_data)
    return SuccessResponse(message="User created successfully.")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login to get access token"
)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate with email or username and receive a bearer token.

    - **identifier**: Email address or username
    - **password**: Account password

    The token payload carries `user_id` and `username`.
    """
    user = user_service.authenticate_user(db, login_data)

    return TokenResponse(
        access_token=create_access_token(user),
        user_id=user.id,
        username=user.username,
    )
