"""
Demo dataset copied into every partition on first access.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List

DAY = timedelta(days=1)
PLACEHOLDER_IMAGE = "https://placehold.co/600x400/9b87f5/FFFFFF"
PLACEHOLDER_AVATAR = "https://placehold.co/100x100/9b87f5/FFFFFF"


def demo_posts(now: datetime) -> List[Dict[str, Any]]:
    """Three posts, one per lifecycle state, timed relative to ``now``."""
    return [
        {
            "id": "post1",
            "content": "Excited to announce our new product launch! #innovation #tech",
            "image_url": PLACEHOLDER_IMAGE,
            "scheduled_at": now + DAY,
            "status": "scheduled",
            "platform": "facebook",
            "stats": {"likes": 0, "comments": 0, "shares": 0},
            "created_at": now,
            "updated_at": now,
        },
        {
            "id": "post2",
            "content": "Check out our latest blog post on social media trends in 2023!",
            "image_url": PLACEHOLDER_IMAGE,
            "status": "published",
            "platform": "instagram",
            "stats": {"likes": 45, "comments": 12, "shares": 5},
            "created_at": now - DAY,
            "updated_at": now - DAY,
        },
        {
            "id": "post3",
            "content": "Working on a draft for next week's big announcement...",
            "status": "draft",
            "platform": "facebook",
            "created_at": now,
            "updated_at": now,
        },
    ]


def demo_platforms() -> List[Dict[str, Any]]:
    return [
        {
            "id": "platform1",
            "name": "facebook",
            "connected": True,
            "pages": [{"id": "page1", "name": "Business Page", "image_url": PLACEHOLDER_AVATAR}],
        },
        {
            "id": "platform2",
            "name": "instagram",
            "connected": True,
            "pages": [{"id": "page2", "name": "Instagram Business", "image_url": PLACEHOLDER_AVATAR}],
        },
    ]


@dataclass
class SeedDataset:
    """What a new partition starts with."""
    posts: Callable[[datetime], List[Dict[str, Any]]] = demo_posts
    platforms: Callable[[], List[Dict[str, Any]]] = demo_platforms


def empty_posts(now: datetime) -> List[Dict[str, Any]]:
    return []


def platform_catalog_only() -> SeedDataset:
    """No demo posts, but every partition still gets the platform catalog."""
    return SeedDataset(posts=empty_posts)
