from typing import Generator, List
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from pydantic_settings import BaseSettings


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Growth Tracker API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database; PostgreSQL in production, SQLite for local runs and tests
    DATABASE_URL: str = "sqlite:///./growth_tracker.db"
    SQLITE_BUSY_TIMEOUT_SECONDS: int = 30

    # JWT (access tokens only)
    SECRET_KEY: str = "growth-tracker-dev-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


# =====================================================================
# DATABASE
# =====================================================================


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """
    Engine for either supported backend.

    SQLite connections are shared across FastAPI's worker threads and wait
    on a locked database instead of failing immediately.
    """
    if database_url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": settings.SQLITE_BUSY_TIMEOUT_SECONDS,
        }
        return create_engine(database_url, connect_args=connect_args, **kwargs)
    return create_engine(database_url, pool_pre_ping=True, **kwargs)


engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
