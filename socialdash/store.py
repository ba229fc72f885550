"""
Post store: keyed, owner-partitioned storage of posts.

Every mutation is validated by the lifecycle rules before it is committed, so
the database never holds a post that breaks them.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .errors import NotFoundError
from .lifecycle import PlatformName, PostStatus, normalize, validate
from .logging_config import store_logger, timed
from .models.post import Post
from .partitions import PartitionManager, build_post
from .schemas.posts import PostResponse, PostStats

# Fields callers may set; id, stats on create and timestamps are owned by the store
CREATE_FIELDS = ("content", "image_url", "platform", "status", "scheduled_at")
UPDATE_FIELDS = CREATE_FIELDS + ("stats",)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def post_to_response(post: Post) -> PostResponse:
    """Convert a Post row to its public representation."""
    stats = None
    if post.likes is not None:
        stats = PostStats(likes=post.likes, comments=post.comments, shares=post.shares)
    return PostResponse(
        id=post.id,
        content=post.content,
        image_url=post.image_url,
        platform=post.platform,
        status=post.status,
        scheduled_at=as_utc(post.scheduled_at),
        stats=stats,
        created_at=as_utc(post.created_at),
        updated_at=as_utc(post.updated_at),
    )


def _row_fields(post: Post) -> Dict[str, Any]:
    stats = None
    if post.likes is not None:
        stats = {"likes": post.likes, "comments": post.comments, "shares": post.shares}
    return {
        "content": post.content,
        "image_url": post.image_url,
        "platform": post.platform,
        "status": post.status,
        "scheduled_at": post.scheduled_at,
        "stats": stats,
    }


def _plain(changes: Any, allowed, exclude_unset: bool = True) -> Dict[str, Any]:
    if hasattr(changes, "model_dump"):
        changes = changes.model_dump(exclude_unset=exclude_unset)
    unknown = set(changes) - set(allowed)
    if unknown:
        raise TypeError(f"Unsupported post fields: {', '.join(sorted(unknown))}")
    return dict(changes)


class PostStore:
    """
    CRUD over one owner partition at a time.

    ``owner`` is the id returned by the session binding; None means the
    shared default partition.
    """

    def __init__(self, partitions: PartitionManager, clear_schedule_on_unschedule: bool = True):
        self.partitions = partitions
        self.clear_schedule_on_unschedule = clear_schedule_on_unschedule

    def _get_row(self, db: Session, owner_id: str, post_id: str) -> Post:
        post = db.get(Post, (owner_id, post_id))
        if post is None:
            raise NotFoundError("Post", post_id, owner=owner_id)
        return post

    def _new_id(self, db: Session, owner_id: str) -> str:
        while True:
            post_id = f"post_{uuid.uuid4().hex[:12]}"
            if db.get(Post, (owner_id, post_id)) is None:
                return post_id

    @timed(store_logger)
    def list(self, owner: Optional[str] = None) -> List[PostResponse]:
        """All posts in the owner's partition, in insertion order."""
        with self.partitions.open(owner) as (owner_id, db):
            rows = db.query(Post).filter(Post.owner_id == owner_id).order_by(Post.position).all()
            return [post_to_response(p) for p in rows]

    def get_by_id(self, owner: Optional[str], post_id: str) -> PostResponse:
        with self.partitions.open(owner) as (owner_id, db):
            return post_to_response(self._get_row(db, owner_id, post_id))

    @timed(store_logger)
    def create(self, owner: Optional[str], fields: Any) -> PostResponse:
        """Validate and append a new post. Stats start at zero."""
        fields = _plain(fields, CREATE_FIELDS, exclude_unset=False)
        fields.setdefault("status", PostStatus.DRAFT.value)
        fields.setdefault("platform", PlatformName.FACEBOOK.value)
        validate(fields)
        fields = normalize(fields, self.clear_schedule_on_unschedule)

        with self.partitions.open(owner) as (owner_id, db):
            now = self.partitions.now()
            position = (db.query(func.max(Post.position)).filter(Post.owner_id == owner_id).scalar() or 0) + 1
            post = build_post(owner_id, position, {
                **fields,
                "id": self._new_id(db, owner_id),
                "stats": {"likes": 0, "comments": 0, "shares": 0},
                "created_at": now,
                "updated_at": now,
            })
            db.add(post)
            db.flush()
            store_logger.info("Post created", owner_id=owner_id, post_id=post.id, status=post.status)
            return post_to_response(post)

    @timed(store_logger)
    def update(self, owner: Optional[str], post_id: str, changes: Any) -> PostResponse:
        """
        Merge ``changes`` over the stored post and commit if the result is valid.

        ``id`` and ``created_at`` never change; ``updated_at`` never moves
        backwards. On any error the stored post is left untouched.
        """
        changes = _plain(changes, UPDATE_FIELDS)

        with self.partitions.open(owner) as (owner_id, db):
            post = self._get_row(db, owner_id, post_id)
            previous_status = post.status

            merged = {**_row_fields(post), **changes}
            validate(merged)
            merged = normalize(merged, self.clear_schedule_on_unschedule)

            stats = merged["stats"]
            if stats is not None and not isinstance(stats, dict):
                stats = stats.model_dump()

            post.content = merged["content"]
            post.image_url = merged["image_url"]
            post.platform = merged["platform"]
            post.status = merged["status"]
            post.scheduled_at = merged["scheduled_at"]
            post.likes = stats["likes"] if stats else None
            post.comments = stats["comments"] if stats else None
            post.shares = stats["shares"] if stats else None
            post.updated_at = max(self.partitions.now(), as_utc(post.updated_at))
            db.flush()

            store_logger.info(
                "Post updated",
                owner_id=owner_id,
                post_id=post_id,
                fields=sorted(changes),
                status_from=previous_status,
                status_to=post.status,
            )
            return post_to_response(post)

    def publish(self, owner: Optional[str], post_id: str) -> PostResponse:
        """Publish a draft or scheduled post immediately."""
        return self.update(owner, post_id, {"status": PostStatus.PUBLISHED.value})

    def delete(self, owner: Optional[str], post_id: str) -> None:
        with self.partitions.open(owner) as (owner_id, db):
            post = self._get_row(db, owner_id, post_id)
            db.delete(post)
            store_logger.info("Post deleted", owner_id=owner_id, post_id=post_id)
