# growth_tracker/api/routers/account.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growth_tracker.core.config import get_db
from growth_tracker.core.security import create_access_token, get_current_user
from growth_tracker.models.user import User
from growth_tracker.services.user import user_service
from growth_tracker.schemas.user import (
    PasswordChangeRequest,
    PrivacyResponse,
    PrivacyUpdateRequest,
    ProfileResponse,
    SuccessResponse,
    UsernameUpdateRequest,
    UsernameUpdateResponse,
)

router = APIRouter(tags=["Account"])


# =====================================================================
# PROFILE
# =====================================================================

@router.get("/profile", response_model=ProfileResponse, summary="Get my profile")
def get_profile(current_user: User = Depends(get_current_user)):
    """Account details of the authenticated user."""
    return ProfileResponse.model_validate(current_user)


# =====================================================================
# PRIVACY
# =====================================================================

@router.get("/get-privacy", response_model=PrivacyResponse, summary="Get profile privacy")
def get_privacy(current_user: User = Depends(get_current_user)):
    """Whether the caller's activity data is hidden from other users."""
    return PrivacyResponse(is_private=current_user.is_private)


@router.post("/update-privacy", response_model=PrivacyResponse, summary="Update profile privacy")
def update_privacy(
    body: PrivacyUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Private accounts answer other users with `ACCOUNT_PRIVATE`."""
    user = user_service.set_privacy(db, user=current_user, is_private=body.is_private)
    return PrivacyResponse(is_private=user.is_private)


# =====================================================================
# CREDENTIALS
# =====================================================================

@router.post(
    "/update-username",
    response_model=UsernameUpdateResponse,
    summary="Change username"
)
def update_username(
    body: UsernameUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Rename the caller's account.

    Returns a fresh access token because the old one carries the old username.
    """
    user = user_service.update_username(db, user=current_user, new_username=body.new_username)
    return UsernameUpdateResponse(
        new_username=user.username,
        access_token=create_access_token(user),
    )


@router.post("/change-password", response_model=SuccessResponse, summary="Change password")
def change_password(
    body: PasswordChangeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    - **current_password**: Must match the stored password
    - **new_password**: At least 8 characters with a letter and a number
    """
    user_service.change_password(
        db,
        user=current_user,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    return SuccessResponse(message="Password updated successfully")
