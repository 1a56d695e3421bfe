"""
Pydantic models for user registration and authentication.

Passwords are accepted on registration and login only; no response
model ever carries the password or its hash.
"""

from pydantic import EmailStr, Field, field_validator

from .base import APIModel


class UserCreate(APIModel):
    """Schema for registering a user."""

    email: EmailStr = Field(..., examples=["investor@example.com"])
    password: str = Field(..., min_length=6, examples=["strongpassword"])
    name: str = Field(..., min_length=1, examples=["Asha Verma"])

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class UserLogin(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserRead(APIModel):
    """Public view of a user."""

    id: str
    email: str
    name: str


class AuthResponse(APIModel):
    """Returned by registration and login."""

    user: UserRead
    token: str
    token_type: str = "bearer"
