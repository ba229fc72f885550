"""
Posts routes for CRUD operations on social media posts.
"""
from fastapi import APIRouter, Depends
from typing import List, Optional

from ..dependencies import get_owner, get_post_store
from ..errors import ValidationError
from ..lifecycle import validate
from ..projections import filter_posts
from ..schemas.posts import PostCreate, PostUpdate, PostResponse, ValidationResult
from ..store import PostStore

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse])
def get_posts(
    status: Optional[str] = None,
    platform: Optional[str] = None,
    search: Optional[str] = None,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Get all posts in the caller's partition with optional filtering."""
    return filter_posts(store.list(owner), status=status, platform=platform, search_term=search)


@router.post("/validate", response_model=ValidationResult)
def validate_post(post_data: PostCreate):
    """Check a post form against the lifecycle rules without saving it."""
    try:
        validate(post_data)
    except ValidationError as e:
        return ValidationResult(
            valid=False,
            error=e.message,
            error_code=e.error_code,
            field=e.details.get("field"),
        )
    return ValidationResult(valid=True)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: str,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Get a single post by ID from the caller's partition."""
    return store.get_by_id(owner, post_id)


@router.post("", response_model=PostResponse)
def create_post(
    post_data: PostCreate,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Create a new post in the caller's partition."""
    return store.create(owner, post_data)


@router.patch("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    post_update: PostUpdate,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Update a post; only the fields sent are changed."""
    return store.update(owner, post_id, post_update)


@router.delete("/{post_id}")
def delete_post(
    post_id: str,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Delete a post from the caller's partition."""
    store.delete(owner, post_id)
    return {"message": "Post deleted"}


@router.post("/{post_id}/publish", response_model=PostResponse)
def publish_post(
    post_id: str,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Publish a draft or scheduled post immediately."""
    return store.publish(owner, post_id)
