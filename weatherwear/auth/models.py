from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

Style = Literal["casual", "formal", "sporty"]

# bcrypt only looks at the first 72 bytes and rejects anything longer.
MAX_PASSWORD_BYTES = 72


class UserPreferences(BaseModel):
    styles: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    preferred_colors: list[str] = Field(default_factory=list)
    preferred_brands: list[str] = Field(default_factory=list)
    style: Style | None = None


class User(BaseModel):
    id: str
    name: str
    email: str
    password_hash: str = Field(default="", exclude=True)
    gender: str | None = None
    age: int | None = None
    preferences: UserPreferences | None = None
    created_at: datetime
    updated_at: datetime


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES)
    gender: str | None = None
    age: int | None = Field(default=None, ge=0, le=150)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    preferences: UserPreferences | None = None


class AuthResponse(BaseModel):
    user: User
    token: str
