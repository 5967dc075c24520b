# growth_tracker/data/activities.py
from enum import Enum
from typing import Dict, List


# =====================================================================
# ENUMS
# =====================================================================

class ActivityName(str, Enum):
    """The fixed set of daily activities a user logs hours against."""
    SLEEP = "sleep"
    STUDY = "study"
    BOOK_READING = "book_reading"
    EATING = "eating"
    FRIENDS = "friends"
    GROOMING = "grooming"
    WORKOUT = "workout"
    REELS = "reels"
    FAMILY = "family"
    IDLE = "idle"
    CREATIVE = "creative"
    TRAVELLING = "travelling"
    ERRAND = "errand"
    REST = "rest"
    ENTERTAINMENT = "entertainment"
    OFFICE = "office"


class TileSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    WIDE = "wide"


# =====================================================================
# CONSTANTS
# =====================================================================

# Declaration order doubles as the default tile order.
ACTIVITY_NAMES: List[str] = [activity.value for activity in ActivityName]

TILE_SIZES: List[str] = [size.value for size in TileSize]

QUARTERS_PER_HOUR = 4
HOURS_PER_DAY = 24
MAX_QUARTER_HOURS = HOURS_PER_DAY * QUARTERS_PER_HOUR
MAX_NOTE_LENGTH = 500


def is_valid_activity(name: str) -> bool:
    return name in ActivityName._value2member_map_


def default_tile_sizes() -> Dict[str, str]:
    """Default tile sizes: a few highlighted tiles, the rest small."""
    highlighted = {
        ActivityName.SLEEP.value: TileSize.MEDIUM.value,
        ActivityName.STUDY.value: TileSize.WIDE.value,
        ActivityName.EATING.value: TileSize.WIDE.value,
    }
    return {name: highlighted.get(name, TileSize.SMALL.value) for name in ACTIVITY_NAMES}
