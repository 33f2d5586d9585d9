from .base import TimestampModel, BaseModel
from .user import User

__all__ = [
    "TimestampModel",
    "BaseModel",
    "User",
]
