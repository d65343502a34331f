"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from models.diff import validate_argb
from services.config_manager import ConfigManager

router = APIRouter()

_COLOR_KEYS = ("foreground", "insertBackground", "deleteBackground", "grayBackground")


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    theme: dict | None = None
    diff: dict | None = None

    @field_validator("theme")
    @classmethod
    def _check_colors(cls, theme: dict | None) -> dict | None:
        if theme:
            for key in _COLOR_KEYS:
                if key in theme:
                    validate_argb(theme[key])
        return theme

    @field_validator("diff")
    @classmethod
    def _check_context_lines(cls, diff: dict | None) -> dict | None:
        context_lines = (diff or {}).get("contextLines")
        if context_lines is not None and (
            isinstance(context_lines, bool)
            or not isinstance(context_lines, int)
            or context_lines < 0
        ):
            raise ValueError("contextLines must be a non-negative integer or null")
        return diff


class ConfigResponse(BaseModel):
    """Configuration response"""

    theme: dict
    diff: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        theme=config.get("theme", {}),
        diff=config.get("diff", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.theme:
        current_config["theme"] = {**current_config.get("theme", {}), **request.theme}
    if request.diff:
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
