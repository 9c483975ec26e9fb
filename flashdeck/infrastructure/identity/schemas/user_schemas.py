"""Pydantic schemas for user data crossing the action boundary."""

from datetime import datetime

from pydantic import BaseModel

from flashdeck.domain.identity.entities.user import User


class UserSchema(BaseModel):
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserSchema":
        return cls(
            id=user.id.value,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
