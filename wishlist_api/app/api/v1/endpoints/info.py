"""
Information endpoint for API v1.

Returns the service name and version.  Publicly accessible; useful as
a liveness probe.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.security import get_settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info(settings: Settings = Depends(get_settings)) -> Dict[str, str]:
    return {"name": settings.project_name, "version": settings.api_version}
