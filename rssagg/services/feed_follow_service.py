"""
Feed follow service: following and unfollowing feeds.

A follow belongs to exactly one user; every write and read here is scoped by
the authenticated user's ID.
"""

import logging
import uuid
from typing import List
from uuid import UUID

from sqlalchemy import select, delete, and_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.exceptions import (
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
)
from rssagg.models import Feed, FeedFollow, User
from rssagg.models.user import get_utc_now

logger = logging.getLogger(__name__)


async def create_feed_follow(db: AsyncSession, user: User, feed_id: UUID) -> FeedFollow:
    """
    Follow a feed.

    Raises:
        NotFoundError: If the feed doesn't exist
        ConflictError: If the user already follows the feed
        InternalError: If the insert fails
    """
    user_id = user.id
    try:
        feed = await db.get(Feed, feed_id)
        existing = await db.execute(
            select(FeedFollow.id).where(
                and_(FeedFollow.user_id == user_id, FeedFollow.feed_id == feed_id)
            )
        )
        already_following = existing.scalar_one_or_none() is not None
    except SQLAlchemyError as e:
        logger.error(f"Error checking follow of feed {feed_id}: {e}")
        raise InternalError("Could not create feed follow")

    if feed is None:
        raise NotFoundError("Could not find feed")
    if already_following:
        raise ConflictError("Already following this feed")

    now = get_utc_now()
    feed_follow = FeedFollow(
        id=uuid.uuid4(),
        created_at=now,
        updated_at=now,
        user_id=user_id,
        feed_id=feed_id,
    )

    try:
        db.add(feed_follow)
        await db.commit()
        await db.refresh(feed_follow)
    except IntegrityError as e:
        # Lost a race with a concurrent follow of the same feed
        await db.rollback()
        logger.warning(f"Duplicate follow of feed {feed_id} by user {user_id}: {e}")
        raise ConflictError("Already following this feed")
    except SQLAlchemyError as e:
        logger.error(f"Error creating follow of feed {feed_id}: {e}")
        await db.rollback()
        raise InternalError("Could not create feed follow")

    return feed_follow


def parse_feed_follow_id(raw_id: str) -> UUID:
    try:
        return UUID(raw_id)
    except ValueError:
        raise BadRequestError("Could not parse feed follow ID")


async def delete_feed_follow(db: AsyncSession, user: User, feed_follow_id: UUID) -> None:
    """
    Unfollow a feed.

    Only a follow owned by ``user`` is deleted; a follow owned by someone
    else is reported exactly like one that doesn't exist.

    Raises:
        NotFoundError: If no follow with this ID belongs to the user
        InternalError: If the delete fails
    """
    try:
        result = await db.execute(
            delete(FeedFollow).where(
                and_(FeedFollow.id == feed_follow_id, FeedFollow.user_id == user.id)
            )
        )
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error deleting feed follow {feed_follow_id}: {e}")
        await db.rollback()
        raise InternalError("Could not delete feed follow")

    if result.rowcount == 0:
        logger.warning(
            f"User {user.id} attempted to delete feed follow {feed_follow_id} "
            f"which is missing or owned by another user"
        )
        raise NotFoundError("Could not find feed follow")

    logger.info(f"User {user.id} deleted feed follow {feed_follow_id}")


async def list_feed_follows(db: AsyncSession, user: User) -> List[FeedFollow]:
    """Return the user's follows, oldest first."""
    user_id = user.id
    try:
        result = await db.execute(
            select(FeedFollow)
            .where(FeedFollow.user_id == user_id)
            .order_by(FeedFollow.created_at, FeedFollow.id)
        )
    except SQLAlchemyError as e:
        # Read failures here are reported as 400, unlike the other listings
        logger.warning(f"Error listing feed follows for user {user_id}: {e}")
        raise BadRequestError("Could not get feed follows")

    return list(result.scalars().all())
