"""User Schemas — Pydantic models for registration and login.

Invariants:
    - UserResponse has no password or hash field: the credential cannot be serialized
      through the API even by accident
    - AccessTokenResponse serializes as {"accessToken": ...}
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Registration body."""
    name: str = ""
    email: str = ""
    password: str = Field("", repr=False)


class LoginRequest(BaseModel):
    """Credentials for POST /users/login."""
    email: str = ""
    password: str = Field("", repr=False)


class UserResponse(BaseModel):
    """Public user data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class AccessTokenResponse(BaseModel):
    """Signed bearer token."""
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
