from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import secrets
import uuid

from rssagg.core.database import Base


def get_utc_now():
    """Return current UTC time with timezone info"""
    return datetime.now(timezone.utc)


def generate_api_key():
    """Return a fresh 64-character hex API key"""
    return secrets.token_hex(32)


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    name = Column(String, nullable=False)
    api_key = Column(String(64), unique=True, nullable=False, index=True, default=generate_api_key)

    # Relationships
    feeds = relationship("Feed", back_populates="user", cascade="all, delete-orphan")
    feed_follows = relationship("FeedFollow", back_populates="user", cascade="all, delete-orphan")
