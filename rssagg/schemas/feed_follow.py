from pydantic import BaseModel
from datetime import datetime
from uuid import UUID


class FeedFollowCreate(BaseModel):
    feed_id: UUID


class FeedFollowResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    user_id: UUID
    feed_id: UUID

    class Config:
        from_attributes = True
