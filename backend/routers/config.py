"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager
from services.step_synthesizer import CHARACTER_BASES

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    languages: dict[str, str] | None = None
    selection: dict | None = None
    git: dict | None = None
    filters: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    languages: dict[str, str]
    selection: dict
    git: dict
    filters: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        languages=config.get("languages", {}),
        selection=config.get("selection", {}),
        git=config.get("git", {}),
        filters=config.get("filters", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.selection:
        base = request.selection.get("characterBase", current_config["selection"].get("characterBase"))
        if base not in CHARACTER_BASES:
            raise HTTPException(status_code=400, detail=f"characterBase must be 0 or 1, got {base}")

    if request.git and "shortHashLength" in request.git:
        length = request.git["shortHashLength"]
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise HTTPException(status_code=400, detail=f"shortHashLength must be a positive integer, got {length!r}")

    # Update only provided fields
    if request.languages is not None:
        current_config["languages"] = {**current_config.get("languages", {}), **request.languages}
    if request.selection:
        current_config["selection"] = {**current_config.get("selection", {}), **request.selection}
    if request.git:
        current_config["git"] = {**current_config.get("git", {}), **request.git}
    if request.filters:
        current_config["filters"] = {**current_config.get("filters", {}), **request.filters}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
