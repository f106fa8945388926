from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.auth import get_current_user
from rssagg.core.database import get_db
from rssagg.models import User
from rssagg.schemas import (
    FeedCreate,
    FeedResponse,
    FeedFollowResponse,
    FeedWithFollowResponse,
)
from rssagg.services.feed_service import FeedService

router = APIRouter(prefix="/v1", tags=["Feeds"])


@router.post(
    "/feeds",
    response_model=FeedWithFollowResponse,
    summary="Create Feed",
    description="""
Register a new RSS feed owned by the caller.

The caller automatically follows the new feed; the response contains both
the feed and that follow. Feed URLs are unique (409 on a duplicate).
    """,
    responses={
        409: {
            "description": "Conflict - a feed with this URL already exists",
            "content": {
                "application/json": {
                    "example": {"error": "Feed with this URL already exists"}
                }
            }
        }
    },
)
async def create_feed(
    params: FeedCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    feed, feed_follow = await FeedService.create_feed(db, user, params.name, params.url)
    return FeedWithFollowResponse(
        feed=FeedResponse.model_validate(feed),
        feed_follow=FeedFollowResponse.model_validate(feed_follow),
    )


@router.get(
    "/feeds",
    response_model=List[FeedResponse],
    summary="List Feeds",
    description="Retrieve every registered feed. No authentication required.",
)
async def list_feeds(db: AsyncSession = Depends(get_db)):
    return await FeedService.list_feeds(db)
