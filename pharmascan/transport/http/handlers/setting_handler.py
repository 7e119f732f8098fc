from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Request

from pharmascan.lib.settings import EnvSettings


router = APIRouter()


@router.get("/settings", summary="Current server settings")
def get_settings(request: Request) -> Dict[str, str]:
    settings = getattr(request.app.state, "settings", None) or EnvSettings(dotenv=False)
    return settings.snapshot()
