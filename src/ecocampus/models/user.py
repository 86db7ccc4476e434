"""Campus user model backing the leaderboard roster."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, UniqueConstraint

from ..core.database import Base


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Represents a student participating in campus sustainability activities."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="users_email_unique"),
        CheckConstraint("lifetime_points >= 0", name="users_lifetime_points_positive"),
    )

    id = Column(String(36), primary_key=True, default=_new_user_id)
    full_name = Column(String)
    email = Column(String)
    course = Column(String)
    lifetime_points = Column(Integer, nullable=False, default=0, index=True)
    profile_img_url = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
