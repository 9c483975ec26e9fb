from typing import Protocol

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    async def find_by_id(self, user_id: UserId) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def find_all(self, limit: int | None = None, offset: int | None = None) -> list[User]: ...

    async def save(self, user: User) -> User: ...

    async def delete(self, user_id: UserId) -> bool: ...

    async def count(self) -> int: ...
