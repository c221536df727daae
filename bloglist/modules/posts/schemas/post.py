from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class PostBase(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[int] = Field(None, ge=0)

class PostCreate(PostBase):
    pass

class PostUpdate(PostBase):
    pass

class PostInDBBase(BaseModel):
    id: str
    title: str
    author: str
    url: str
    likes: int
    owner_id: str = Field(..., serialization_alias="ownerId")
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class Post(PostInDBBase):
    """Post model returned to client"""
    pass

class OwnerSummary(BaseModel):
    id: str
    username: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class PostWithOwner(PostInDBBase):
    """Post with its owning author embedded, null once the author is gone"""
    owner: Optional[OwnerSummary] = None
