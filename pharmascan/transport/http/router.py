from __future__ import annotations

from fastapi import APIRouter

from .handlers.export_handler import router as export_router
from .handlers.records_handler import router as records_router
from .handlers.setting_handler import router as settings_router


api_router = APIRouter()
api_router.include_router(records_router, prefix="/api", tags=["records"])
api_router.include_router(export_router, prefix="/api", tags=["export"])
api_router.include_router(settings_router, prefix="/api", tags=["settings"])
