"""
Post model for social media content, partitioned by owner.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from ..database import Base


class Post(Base):
    __tablename__ = "posts"

    owner_id = Column(String(64), primary_key=True)
    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, index=True)  # insertion order within the partition
    content = Column(Text, nullable=False)
    image_url = Column(String(2048), nullable=True)
    status = Column(String(20), nullable=False, default="draft", index=True)  # draft, scheduled, published
    platform = Column(String(50), nullable=False)  # facebook, instagram
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    likes = Column(Integer, nullable=True)
    comments = Column(Integer, nullable=True)
    shares = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
