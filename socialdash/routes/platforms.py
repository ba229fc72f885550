"""
Platform routes for listing and (dis)connecting social accounts.
"""
from fastapi import APIRouter, Depends
from typing import List, Optional

from ..dependencies import get_owner, get_platform_store
from ..platforms import PlatformStore
from ..schemas.platforms import PlatformResponse

router = APIRouter(prefix="/api/platforms", tags=["platforms"])


@router.get("", response_model=List[PlatformResponse])
def get_platforms(
    owner: Optional[str] = Depends(get_owner),
    store: PlatformStore = Depends(get_platform_store),
):
    """Get the platform catalog of the caller's partition."""
    return store.list(owner)


@router.post("/{platform_id}/connect", response_model=PlatformResponse)
def connect_platform(
    platform_id: str,
    owner: Optional[str] = Depends(get_owner),
    store: PlatformStore = Depends(get_platform_store),
):
    """Mark a platform as connected."""
    return store.set_connected(owner, platform_id, True)


@router.post("/{platform_id}/disconnect", response_model=PlatformResponse)
def disconnect_platform(
    platform_id: str,
    owner: Optional[str] = Depends(get_owner),
    store: PlatformStore = Depends(get_platform_store),
):
    """Disconnect a platform and remove all of its pages."""
    return store.set_connected(owner, platform_id, False)
