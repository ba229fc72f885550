"""
Platform models for connectable social accounts and their pages.
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKeyConstraint
from sqlalchemy.orm import relationship
from ..database import Base


class Platform(Base):
    __tablename__ = "platforms"

    owner_id = Column(String(64), primary_key=True)
    id = Column(String(64), primary_key=True)
    name = Column(String(50), nullable=False)  # facebook, instagram
    connected = Column(Boolean, default=False, nullable=False)
    position = Column(Integer, nullable=False)

    # Relationships
    pages = relationship(
        "PlatformPage",
        back_populates="platform",
        cascade="all, delete-orphan",
        order_by="PlatformPage.position",
    )


class PlatformPage(Base):
    __tablename__ = "platform_pages"
    __table_args__ = (
        ForeignKeyConstraint(
            ["owner_id", "platform_id"],
            ["platforms.owner_id", "platforms.id"],
            ondelete="CASCADE",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(64), nullable=False)
    platform_id = Column(String(64), nullable=False)
    page_id = Column(String(64), nullable=False)
    name = Column(String(200), nullable=False)
    image_url = Column(String(2048), nullable=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    platform = relationship("Platform", back_populates="pages")
