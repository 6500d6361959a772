from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime, timezone
from .db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    # Unique constraint is what finally rejects duplicate usernames
    username = Column(String(32), unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    follow_count = Column(Integer, default=0, nullable=False)
    follower_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    # soft delete marker, deleted users are invisible to lookups
    deleted_at = Column(DateTime, nullable=True)

    def to_dict(self) -> dict:
        """Public profile used in API responses."""
        return {
            "id": self.id,
            "name": self.username,
            "follow_count": self.follow_count,
            "follower_count": self.follower_count,
        }
