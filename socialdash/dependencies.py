"""
FastAPI dependencies wiring requests to the stores and the session binding.

Stores are built once per process by ``get_stores``. Tests replace them with
``app.dependency_overrides``.
"""
from dataclasses import dataclass
from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Depends

from .analytics import AnalyticsSource, get_analytics_source
from .auth import get_current_user
from .config import Settings, get_settings
from .database import SessionLocal
from .partitions import PartitionManager
from .platforms import PlatformStore
from .seed_data import SeedDataset, platform_catalog_only
from .session import SessionBinding, TokenSession
from .store import PostStore


@dataclass
class Stores:
    partitions: PartitionManager
    posts: PostStore
    platforms: PlatformStore


def build_stores(session_factory, settings: Settings, seed: Optional[SeedDataset] = None, **manager_kwargs) -> Stores:
    """Construct the partition manager and both stores around one session factory."""
    if seed is None:
        seed = SeedDataset() if settings.seed_demo_data else platform_catalog_only()
    partitions = PartitionManager(
        session_factory,
        seed=seed,
        default_owner=settings.default_owner,
        **manager_kwargs,
    )
    return Stores(
        partitions=partitions,
        posts=PostStore(partitions, clear_schedule_on_unschedule=settings.clear_schedule_on_unschedule),
        platforms=PlatformStore(partitions),
    )


@lru_cache()
def get_stores() -> Stores:
    return build_stores(SessionLocal, get_settings())


def get_post_store(stores: Stores = Depends(get_stores)) -> PostStore:
    return stores.posts


def get_platform_store(stores: Stores = Depends(get_stores)) -> PlatformStore:
    return stores.platforms


def get_analytics() -> AnalyticsSource:
    settings = get_settings()
    return get_analytics_source(settings.analytics_source, settings.analytics_seed)


def get_display_timezone() -> tzinfo:
    return ZoneInfo(get_settings().display_timezone)


def get_session_binding(current_user=Depends(get_current_user)) -> SessionBinding:
    return SessionBinding(TokenSession(current_user))


def get_owner(binding: SessionBinding = Depends(get_session_binding)) -> Optional[str]:
    """Owner id of the caller, or None for anonymous callers (default partition)."""
    return binding.resolve_owner()
