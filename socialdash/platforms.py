"""
Platform catalog: the connectable Facebook/Instagram accounts of a partition.

The catalog is seeded with the partition; afterwards only ``connected`` and
the page list change. A disconnected platform never keeps pages.
"""
from typing import List, Optional

from .errors import NotFoundError
from .logging_config import store_logger
from .models.platform import Platform
from .partitions import PartitionManager
from .schemas.platforms import PlatformPageResponse, PlatformResponse


def platform_to_response(platform: Platform) -> PlatformResponse:
    return PlatformResponse(
        id=platform.id,
        name=platform.name,
        connected=platform.connected,
        pages=[
            PlatformPageResponse(id=page.page_id, name=page.name, image_url=page.image_url)
            for page in platform.pages
        ],
    )


class PlatformStore:
    def __init__(self, partitions: PartitionManager):
        self.partitions = partitions

    def list(self, owner: Optional[str] = None) -> List[PlatformResponse]:
        with self.partitions.open(owner) as (owner_id, db):
            rows = db.query(Platform).filter(Platform.owner_id == owner_id).order_by(Platform.position).all()
            return [platform_to_response(p) for p in rows]

    def set_connected(self, owner: Optional[str], platform_id: str, connected: bool) -> PlatformResponse:
        """Connect or disconnect a platform. Disconnecting removes its pages."""
        with self.partitions.open(owner) as (owner_id, db):
            platform = db.get(Platform, (owner_id, platform_id))
            if platform is None:
                raise NotFoundError("Platform", platform_id, owner=owner_id)

            platform.connected = connected
            if not connected:
                platform.pages.clear()
            db.flush()

            store_logger.info(
                "Platform connected" if connected else "Platform disconnected",
                owner_id=owner_id,
                platform_id=platform_id,
            )
            return platform_to_response(platform)
