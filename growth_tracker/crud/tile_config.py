# crud/tile_config.py
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from growth_tracker.crud.upsert import upsert
from growth_tracker.models.tile_config import TileConfig


class CRUDTileConfig:
    """CRUD operations for TileConfig model."""

    def get(self, db: Session, *, user_id: int) -> Optional[TileConfig]:
        """Get tile config by user ID."""
        return db.get(TileConfig, user_id)

    def save(
        self,
        db: Session,
        *,
        user_id: int,
        order: List[str],
        sizes: Dict[str, str],
    ) -> TileConfig:
        """Replace the user's tile config in one statement; the caller commits."""
        now = datetime.now(timezone.utc)
        return upsert(
            db,
            TileConfig,
            values={
                "user_id": user_id,
                "order": order,
                "sizes": sizes,
                "created_at": now,
                "updated_at": now,
            },
            index_elements=["user_id"],
            update_fields=["order", "sizes", "updated_at"],
        )


crud_tile_config = CRUDTileConfig()
