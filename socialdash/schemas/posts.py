from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime


class PostStats(BaseModel):
    likes: int = Field(ge=0)
    comments: int = Field(ge=0)
    shares: int = Field(ge=0)


class PostBase(BaseModel):
    content: str
    image_url: Optional[str] = None
    platform: str = "facebook"


class PostCreate(PostBase):
    status: str = "draft"
    scheduled_at: Optional[Union[datetime, str]] = None


class PostUpdate(BaseModel):
    content: Optional[str] = None
    image_url: Optional[str] = None
    platform: Optional[str] = None
    status: Optional[str] = None
    scheduled_at: Optional[Union[datetime, str]] = None
    stats: Optional[PostStats] = None


class PostResponse(PostBase):
    id: str
    status: str
    scheduled_at: Optional[datetime] = None
    stats: Optional[PostStats] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None
    error_code: Optional[str] = None
    field: Optional[str] = None
