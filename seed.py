"""
Seed a partition with the demo dataset.

Usage: python seed.py [owner_id]
Without an owner id the shared default partition is seeded.
"""
import sys

from socialdash import models  # noqa: F401
from socialdash.config import get_settings
from socialdash.database import SessionLocal, engine, Base
from socialdash.dependencies import build_stores
from socialdash.seed_data import SeedDataset

# Create tables
Base.metadata.create_all(bind=engine)

owner = sys.argv[1] if len(sys.argv) > 1 else None
stores = build_stores(SessionLocal, get_settings(), seed=SeedDataset())

if stores.partitions.is_seeded(owner):
    print(f"Partition '{stores.partitions.resolve(owner)}' was already seeded")
    sys.exit(0)

posts = stores.posts.list(owner)
platforms = stores.platforms.list(owner)

print(f"Partition '{stores.partitions.resolve(owner)}' seeded successfully!")
print(f"  - {len(posts)} posts")
print(f"  - {len(platforms)} platforms")
