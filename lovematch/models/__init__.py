from .base import Base
from .profile import MatchNotification, ProfileRecord

__all__ = [
    "Base",
    "ProfileRecord",
    "MatchNotification",
]
