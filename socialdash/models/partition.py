"""
Partition model recording which owners have been seeded with demo data.
"""
from sqlalchemy import Column, String, DateTime
from ..database import Base


class Partition(Base):
    __tablename__ = "partitions"

    owner_id = Column(String(64), primary_key=True)
    seeded_at = Column(DateTime(timezone=True), nullable=False)
