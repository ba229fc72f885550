from .user import User
from .post import Post
from .platform import Platform, PlatformPage
from .partition import Partition

__all__ = [
    "User",
    "Post",
    "Platform",
    "PlatformPage",
    "Partition",
]
