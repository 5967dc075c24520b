# models/tile_config.py
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON
from sqlalchemy.orm import relationship
from growth_tracker.core.config import Base


class TileConfig(Base):
    """Per-user dashboard layout: tile order and tile sizes."""

    __tablename__ = "tile_configs"

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # ["sleep", "study", ...] - a permutation of every activity name
    order = Column(JSON, nullable=False)
    # {"sleep": "medium", "study": "wide", ...}
    sizes = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user = relationship("User", back_populates="tile_config")
