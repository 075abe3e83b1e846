from pydantic import BaseModel, Field
from typing import Optional


class AuthUrlResponse(BaseModel):
    url: str


class GuestLogin(BaseModel):
    """Guest registration. Missing fields are generated server-side."""
    id: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)


class IdentityResponse(BaseModel):
    id: str
    email: str
    name: Optional[str]

    class Config:
        from_attributes = True
