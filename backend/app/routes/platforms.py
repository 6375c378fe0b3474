"""
Lists the video platforms prompts can be generated for.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_registry
from app.models.response_models import PlatformInfo
from app.services.platform_registry import PlatformRegistry

router = APIRouter(prefix="/platforms", tags=["Platforms"])


@router.get("", response_model=List[PlatformInfo])
async def list_platforms(registry: PlatformRegistry = Depends(get_registry)):
    """Get available platforms as [{id, name}, ...] in display order."""
    return registry.list_platforms()
