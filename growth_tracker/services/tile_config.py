import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import InvalidConfigError
from growth_tracker.crud.tile_config import crud_tile_config
from growth_tracker.data.activities import (
    ACTIVITY_NAMES,
    TILE_SIZES,
    default_tile_sizes,
)

logger = logging.getLogger(__name__)


@dataclass
class TileLayout:
    order: List[str] = field(default_factory=lambda: list(ACTIVITY_NAMES))
    sizes: Dict[str, str] = field(default_factory=default_tile_sizes)

    def to_dict(self) -> Dict[str, Any]:
        return {"order": list(self.order), "sizes": dict(self.sizes)}


# =====================================================================
# VALIDATION
# =====================================================================


def validate_order(order: List[Any]) -> List[str]:
    """The order must list every activity exactly once."""
    if not isinstance(order, list) or not all(isinstance(name, str) for name in order):
        raise InvalidConfigError("order must be a list of activity names")

    duplicates = sorted({name for name in order if order.count(name) > 1})
    if duplicates:
        raise InvalidConfigError(f"order contains duplicates: {', '.join(duplicates)}")

    unknown = sorted(set(order) - set(ACTIVITY_NAMES))
    if unknown:
        raise InvalidConfigError(f"order contains unknown activities: {', '.join(unknown)}")

    missing = [name for name in ACTIVITY_NAMES if name not in order]
    if missing:
        raise InvalidConfigError(f"order is missing activities: {', '.join(missing)}")

    return list(order)


def validate_sizes(sizes: Dict[str, Any]) -> Dict[str, str]:
    """
    Keep sizes for known activities, reject bad values, fill in defaults.

    Unknown activity keys are ignored.
    """
    if not isinstance(sizes, dict):
        raise InvalidConfigError("sizes must be an object")

    resolved = default_tile_sizes()
    for name, size in sizes.items():
        if name not in resolved:
            continue
        if size not in TILE_SIZES:
            raise InvalidConfigError(
                f"Invalid size for {name}: {size!r} (expected one of {', '.join(TILE_SIZES)})"
            )
        resolved[name] = size
    return resolved


# =====================================================================
# SERVICE
# =====================================================================


class TileConfigService:
    """Per-user dashboard tile layout."""

    def __init__(self):
        self.crud = crud_tile_config

    def get_config(self, db: Session, *, user_id: int) -> TileLayout:
        """Stored layout, or the default layout if none was saved."""
        stored = self.crud.get(db, user_id=user_id)
        if stored is None:
            return TileLayout()
        return TileLayout(order=list(stored.order), sizes=dict(stored.sizes))

    def save_config(
        self, db: Session, *, user_id: int, order: List[Any], sizes: Dict[str, Any]
    ) -> TileLayout:
        """
        Validate and replace the user's layout.

        Nothing is written if validation fails.

        Raises:
            InvalidConfigError: If order is not a permutation of the activities
                or a size value is not recognised
        """
        layout = TileLayout(order=validate_order(order), sizes=validate_sizes(sizes))

        try:
            self.crud.save(db, user_id=user_id, order=layout.order, sizes=layout.sizes)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Saved tile config user_id={user_id}")
        return layout


tile_config_service = TileConfigService()
