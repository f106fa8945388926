from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.auth import get_current_user
from rssagg.core.database import get_db
from rssagg.models import User
from rssagg.schemas import FeedFollowCreate, FeedFollowResponse
from rssagg.services import feed_follow_service

router = APIRouter(prefix="/v1", tags=["Feed Follows"])


@router.post(
    "/feed_follows",
    response_model=FeedFollowResponse,
    summary="Follow Feed",
    description="Follow an existing feed. Following the same feed twice is a 409.",
)
async def create_feed_follow(
    params: FeedFollowCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await feed_follow_service.create_feed_follow(db, user, params.feed_id)


@router.delete(
    "/feed_follows/{feed_follow_id}",
    summary="Unfollow Feed",
    description="""
Delete one of the caller's feed follows.

Only follows owned by the caller can be deleted. A follow that belongs to
another user is answered with 404 and left in place.
    """,
)
async def delete_feed_follow(
    feed_follow_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    # Parsed here rather than by FastAPI so a bad ID is a 400, not a decode error
    parsed_id = feed_follow_service.parse_feed_follow_id(feed_follow_id)
    await feed_follow_service.delete_feed_follow(db, user, parsed_id)
    return {}


@router.get(
    "/feed_follows",
    response_model=List[FeedFollowResponse],
    summary="List Feed Follows",
    description="Retrieve the caller's feed follows.",
)
@router.get("/feed_follows/", response_model=List[FeedFollowResponse], include_in_schema=False)
async def list_feed_follows(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await feed_follow_service.list_feed_follows(db, user)
