from typing import Optional
from pydantic import AliasChoices, BaseModel, Field

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = Field(None, validation_alias=AliasChoices("password", "secret"))

class Token(BaseModel):
    token: str
    username: str
    name: Optional[str] = None

class TokenPayload(BaseModel):
    id: Optional[str] = None
    username: Optional[str] = None
