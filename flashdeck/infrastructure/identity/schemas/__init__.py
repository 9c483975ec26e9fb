from .user_schemas import UserSchema

__all__ = ["UserSchema"]
