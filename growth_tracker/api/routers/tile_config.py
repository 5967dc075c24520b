# growth_tracker/api/routers/tile_config.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growth_tracker.core.config import get_db
from growth_tracker.core.security import get_current_user
from growth_tracker.models.user import User
from growth_tracker.services.tile_config import TileLayout, tile_config_service
from growth_tracker.services.user import user_service
from growth_tracker.schemas.tile_config import (
    SaveTileConfigRequest,
    TileConfigByUsernameRequest,
    TileConfigRead,
    TileConfigResponse,
)

router = APIRouter(prefix="/tile-config", tags=["Tile Config"])


def to_response(layout: TileLayout) -> TileConfigResponse:
    return TileConfigResponse(data=TileConfigRead(**layout.to_dict()))


@router.get("", response_model=TileConfigResponse, summary="Get my tile layout")
def get_tile_config(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Saved layout, or the default layout when none was saved."""
    return to_response(tile_config_service.get_config(db, user_id=current_user.id))


@router.post("", response_model=TileConfigResponse, summary="Save my tile layout")
def save_tile_config(
    body: SaveTileConfigRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    - **config.order**: Every activity name exactly once
    - **config.sizes**: activity name -> small | medium | wide

    An invalid config is rejected and the saved layout is left unchanged.
    """
    layout = tile_config_service.save_config(
        db,
        user_id=current_user.id,
        order=body.config.order,
        sizes=body.config.sizes,
    )
    return to_response(layout)


@router.post("/user", response_model=TileConfigResponse, summary="Get another user's tile layout")
def get_tile_config_by_username(
    body: TileConfigByUsernameRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    target = user_service.get_viewable_user(db, viewer=current_user, username=body.username)
    return to_response(tile_config_service.get_config(db, user_id=target.id))
