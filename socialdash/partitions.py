"""
Owner partitions: resolution, lazy seeding, locking and session scope.

Every store operation runs inside ``PartitionManager.open``:

1. the owner is resolved (None -> the named default partition),
2. the owner's lock is taken, so writes to one partition never interleave,
3. a database session is opened and the partition seeded if this is its
   first access,
4. the session commits on success and rolls back on any error.
"""
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Dict, Iterator, Optional, Tuple

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from .errors import TransientFetchError
from .lifecycle import normalize, validate
from .logging_config import store_logger
from .models.partition import Partition
from .models.platform import Platform, PlatformPage
from .models.post import Post
from .seed_data import SeedDataset

DEFAULT_OWNER = "default"

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PartitionManager:
    """Shared by the post store and the platform store."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        seed: Optional[SeedDataset] = None,
        clock: Clock = utcnow,
        default_owner: str = DEFAULT_OWNER,
    ):
        self._session_factory = session_factory
        self._seed = seed
        self._clock = clock
        self.default_owner = default_owner
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def now(self) -> datetime:
        """The clock's current time in UTC."""
        current = self._clock()
        if current.tzinfo is None:
            return current.replace(tzinfo=timezone.utc)
        return current.astimezone(timezone.utc)

    def resolve(self, owner: Optional[str]) -> str:
        """Map an owner id (or None) to the partition it names."""
        if owner is None or owner == "":
            return self.default_owner
        return str(owner)

    def lock_for(self, owner_id: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = self._locks[owner_id] = threading.RLock()
            return lock

    @contextmanager
    def open(self, owner: Optional[str]) -> Iterator[Tuple[str, Session]]:
        """Yield ``(owner_id, session)`` for one atomic partition operation."""
        owner_id = self.resolve(owner)
        with self.lock_for(owner_id):
            db = self._session_factory()
            try:
                self._ensure_seeded(db, owner_id)
                yield owner_id, db
                db.commit()
            except OperationalError as e:
                db.rollback()
                store_logger.error("Storage unavailable", error=e, owner_id=owner_id)
                raise TransientFetchError("Storage is temporarily unavailable") from e
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def is_seeded(self, owner: Optional[str]) -> bool:
        owner_id = self.resolve(owner)
        db = self._session_factory()
        try:
            return db.get(Partition, owner_id) is not None
        finally:
            db.close()

    def _ensure_seeded(self, db: Session, owner_id: str) -> None:
        """Seed a partition on its first access. Runs at most once per owner."""
        if db.get(Partition, owner_id) is not None:
            return

        now = self.now()
        post_count = platform_count = 0
        if self._seed is not None:
            for position, fields in enumerate(self._seed.posts(now)):
                db.add(build_post(owner_id, position, fields))
                post_count += 1
            for position, fields in enumerate(self._seed.platforms()):
                db.add(build_platform(owner_id, position, fields))
                platform_count += 1

        db.add(Partition(owner_id=owner_id, seeded_at=now))
        db.flush()
        store_logger.info(
            "Partition seeded",
            owner_id=owner_id,
            posts=post_count,
            platforms=platform_count,
        )


def build_post(owner_id: str, position: int, fields: dict) -> Post:
    """Create a Post row from validated, normalized fields."""
    validate(fields)
    fields = normalize(fields, clear_stale_schedule=False)
    stats = fields.get("stats")
    if stats is not None and not isinstance(stats, dict):
        stats = stats.model_dump()
    return Post(
        owner_id=owner_id,
        id=fields["id"],
        position=position,
        content=fields["content"],
        image_url=fields.get("image_url"),
        status=fields["status"],
        platform=fields["platform"],
        scheduled_at=fields.get("scheduled_at"),
        likes=stats["likes"] if stats else None,
        comments=stats["comments"] if stats else None,
        shares=stats["shares"] if stats else None,
        created_at=fields["created_at"],
        updated_at=fields["updated_at"],
    )


def build_platform(owner_id: str, position: int, fields: dict) -> Platform:
    platform = Platform(
        owner_id=owner_id,
        id=fields["id"],
        name=fields["name"],
        connected=fields.get("connected", False),
        position=position,
    )
    if platform.connected:
        for page_position, page in enumerate(fields.get("pages") or []):
            platform.pages.append(PlatformPage(
                owner_id=owner_id,
                page_id=page["id"],
                name=page["name"],
                image_url=page.get("image_url"),
                position=page_position,
            ))
    return platform
