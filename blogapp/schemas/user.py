"""Pydantic schemas for users and the session probe."""
from datetime import datetime

from pydantic import BaseModel


class UserCreateSchema(BaseModel):
    email: str
    password: str


class UserOutSchema(BaseModel):
    id: int
    email: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class SessionOutSchema(BaseModel):
    authenticated: bool
    user: UserOutSchema | None = None
