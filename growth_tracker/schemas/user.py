# schemas/user.py
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional


USERNAME_PATTERN = r"^[A-Za-z0-9_.]+$"


# =====================================================================
# 1. BASE SCHEMAS
# =====================================================================

class UserBase(BaseModel):
    """Base schema with common public fields."""
    username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    email: EmailStr

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


# =====================================================================
# 2. CREATE SCHEMAS
# =====================================================================

class UserCreate(UserBase):
    """Public registration."""
    password: str = Field(..., min_length=8, max_length=128)


# =====================================================================
# 3. UPDATE SCHEMAS
# =====================================================================

class UsernameUpdateRequest(BaseModel):
    new_username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)


class PasswordChangeRequest(BaseModel):
    """Password change - current password required."""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)

    @field_validator('new_password')
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not any(c.isalpha() for c in v):
            raise ValueError('Password must contain at least one letter')
        if not any(c.isdigit() for c in v):
            raise ValueError('Password must contain at least one number')
        return v


class PrivacyUpdateRequest(BaseModel):
    is_private: bool


# =====================================================================
# 4. READ SCHEMAS
# =====================================================================

class UserOut(BaseModel):
    """Minimal public view."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: EmailStr
    is_private: bool


# =====================================================================
# 5. AUTH SCHEMAS
# =====================================================================

class LoginRequest(BaseModel):
    """Login with either email or username."""
    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Authentication token response."""
    success: bool = True
    access_token: str
    token_type: str = "bearer"
    user_id: int
    username: str


# =====================================================================
# RESPONSE WRAPPERS
# =====================================================================

class SuccessResponse(BaseModel):
    """Generic success response."""
    success: bool = True
    message: str


class PrivacyResponse(BaseModel):
    success: bool = True
    is_private: bool


class UsernameUpdateResponse(BaseModel):
    success: bool = True
    new_username: str
    access_token: Optional[str] = None


class ProfileResponse(UserOut):
    """The caller's own account."""
    success: bool = True
