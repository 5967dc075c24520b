# growth_tracker/schemas/__init__.py

from .user import (
    UserBase,
    UserCreate,
    UserOut,
    UsernameUpdateRequest,
    PasswordChangeRequest,
    PrivacyUpdateRequest,
    LoginRequest,
    TokenResponse,
    SuccessResponse,
    PrivacyResponse,
    UsernameUpdateResponse,
    ProfileResponse,
)
from .activity import (
    CreateActivityRequest,
    GetActivitiesRequest,
    DaySummaryRequest,
    GetStreakRequest,
    ActivityRead,
    DailyTotalRead,
    StreakRead,
    LoggedActivityRead,
    CreateActivityResponse,
    ActivityListResponse,
    DaySummaryResponse,
    StreakResponse,
)
from .tile_config import (
    TileConfigData,
    SaveTileConfigRequest,
    TileConfigByUsernameRequest,
    TileConfigRead,
    TileConfigResponse,
)


__all__ = [
    # Users
    "UserBase", "UserCreate", "UserOut",
    "UsernameUpdateRequest", "PasswordChangeRequest", "PrivacyUpdateRequest",
    "LoginRequest", "TokenResponse", "SuccessResponse",
    "PrivacyResponse", "UsernameUpdateResponse", "ProfileResponse",

    # Activities & streaks
    "CreateActivityRequest", "GetActivitiesRequest", "DaySummaryRequest",
    "GetStreakRequest", "ActivityRead", "DailyTotalRead", "StreakRead",
    "LoggedActivityRead", "CreateActivityResponse", "ActivityListResponse",
    "DaySummaryResponse", "StreakResponse",

    # Tile config
    "TileConfigData", "SaveTileConfigRequest", "TileConfigByUsernameRequest",
    "TileConfigRead", "TileConfigResponse",
]
