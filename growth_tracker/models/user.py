# models/user.py

from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, DateTime, Integer
from sqlalchemy.orm import relationship
from growth_tracker.core.config import Base


class User(Base):
    __tablename__ = "users"

    # ---- Base fields ----
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # ---- Profile ----
    is_private = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    # ---- Relationships ----
    activity_logs = relationship("ActivityLog", back_populates="user", cascade="all, delete-orphan")
    tile_config = relationship("TileConfig", back_populates="user", uselist=False, cascade="all, delete-orphan")
