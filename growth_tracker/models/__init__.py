# growth_tracker/models/__init__.py

from growth_tracker.core.config import Base

# Import all models here so metadata.create_all and app-wide imports work
from .user import User
from .activity_log import ActivityLog
from .tile_config import TileConfig

__all__ = [
    "Base",
    "User",
    "ActivityLog",
    "TileConfig",
]
