from pydantic import BaseModel
from typing import List, Optional


class PlatformPageResponse(BaseModel):
    id: str
    name: str
    image_url: Optional[str] = None


class PlatformResponse(BaseModel):
    id: str
    name: str
    connected: bool
    pages: List[PlatformPageResponse] = []
