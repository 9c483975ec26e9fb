"""Identity domain layer."""

from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
]
