from typing import List, Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class AuthorBase(BaseModel):
    username: Optional[str] = None
    name: Optional[str] = None

class AuthorCreate(AuthorBase):
    # Length is checked by the service, the stored value is only the hash
    password: Optional[str] = Field(None, validation_alias=AliasChoices("password", "secret"))

class PostSummary(BaseModel):
    """Projection of an owned post embedded in an author listing"""
    id: str
    title: str
    author: str
    url: str

    model_config = ConfigDict(from_attributes=True)

class Author(AuthorBase):
    """Author returned to client, never carries the password hash"""
    id: str
    username: str
    created_at: Optional[datetime] = None
    posts: List[PostSummary] = []

    model_config = ConfigDict(from_attributes=True)
