import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from growth_tracker.core.config import Base, engine, settings
from growth_tracker.core.exceptions import register_exception_handlers
from growth_tracker.core.logging_config import configure_logging, request_logging_middleware
from growth_tracker.api.routers import auth, account, activities, streaks, tile_config
from growth_tracker import models  # noqa: F401  registers tables on Base.metadata

configure_logging()
logger = logging.getLogger(__name__)

# =====================================================================
# CREATE APP
# =====================================================================

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    description="Daily activity logging and 24-hour streak tracking API",
    version="1.0.0",
)

# =====================================================================
# MIDDLEWARE
# =====================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)
app.middleware("http")(request_logging_middleware)

logger.info(f"CORS allowed origins: {settings.CORS_ORIGINS}")

register_exception_handlers(app)

# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

Base.metadata.create_all(bind=engine)

# =====================================================================
# HEALTH CHECK (before routers)
# =====================================================================


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# =====================================================================
# ROUTES
# =====================================================================

app.include_router(auth.router)
app.include_router(account.router)
app.include_router(activities.router)
app.include_router(streaks.router)
app.include_router(tile_config.router)

# =====================================================================
# ROOT ENDPOINT
# =====================================================================


@app.get("/")
def root():
    """API root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "auth": ["/register", "/login"],
            "account": ["/profile", "/get-privacy", "/update-privacy", "/update-username", "/change-password"],
            "activities": ["/create-activity", "/get-activities", "/get-day-summary"],
            "streaks": ["/get-streak"],
            "tile_config": ["/tile-config", "/tile-config/user"],
        },
    }
