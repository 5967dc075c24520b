from typing import Any, Dict, List

from pydantic import BaseModel, Field


class TileConfigData(BaseModel):
    """Dashboard layout. Contents are checked by the tile config service."""
    order: List[Any] = Field(default_factory=list)
    sizes: Dict[str, Any] = Field(default_factory=dict)


class SaveTileConfigRequest(BaseModel):
    config: TileConfigData


class TileConfigByUsernameRequest(BaseModel):
    username: str = Field(..., min_length=1)


class TileConfigRead(BaseModel):
    order: List[str]
    sizes: Dict[str, str]


class TileConfigResponse(BaseModel):
    success: bool = True
    data: TileConfigRead
