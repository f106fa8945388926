from pydantic import BaseModel
from datetime import datetime
from uuid import UUID

from .feed_follow import FeedFollowResponse


class FeedCreate(BaseModel):
    name: str
    url: str


class FeedResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    name: str
    url: str
    user_id: UUID

    class Config:
        from_attributes = True


class FeedWithFollowResponse(BaseModel):
    """A newly registered feed together with its creator's follow"""
    feed: FeedResponse
    feed_follow: FeedFollowResponse
