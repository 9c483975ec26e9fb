"""Identity domain exceptions."""

from flashdeck.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    """Raised when an email is already used by another user."""

    def __init__(self, email: str) -> None:
        super().__init__("User with this email already exists", {"email": email})
        self.email = email

    def __str__(self) -> str:
        return self.message
