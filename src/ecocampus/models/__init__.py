"""SQLAlchemy models for EcoCampus."""

from .user import User

__all__ = [
    "User",
]
