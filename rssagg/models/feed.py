from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid

from rssagg.core.database import Base
from rssagg.models.user import get_utc_now


class Feed(Base):
    __tablename__ = "feeds"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False, unique=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="feeds")
    follows = relationship("FeedFollow", back_populates="feed", cascade="all, delete-orphan")
