from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
import uuid

from rssagg.core.database import Base
from rssagg.models.user import get_utc_now


class FeedFollow(Base):
    __tablename__ = "feed_follows"
    __table_args__ = (
        UniqueConstraint("user_id", "feed_id", name="uq_feed_follows_user_feed"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=get_utc_now, nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    feed_id = Column(Uuid, ForeignKey("feeds.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="feed_follows")
    feed = relationship("Feed", back_populates="follows")
