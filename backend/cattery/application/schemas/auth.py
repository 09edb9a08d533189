"""Pydantic DTOs for registration, login and auth status."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    username: str = Field(..., examples=["alice"])
    password: str = Field(..., examples=["secret1"])
    email: str | None = Field(None, examples=["alice@example.com"])


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    """Public view of an identity: never carries the password hash."""

    id: int
    username: str
    email: str | None
    created_at: datetime
    last_login: datetime | None

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
    token: str
    expires_at: datetime = Field(serialization_alias="expiresAt")


class AuthStatusResponse(BaseModel):
    authenticated: bool
    user: UserResponse | None = None


class MessageResponse(BaseModel):
    message: str
