import logging
import uuid
from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.exceptions import ConflictError, InternalError
from rssagg.models import Feed, FeedFollow, User
from rssagg.models.user import get_utc_now

logger = logging.getLogger(__name__)


class FeedService:
    """Service layer for feed operations"""

    @staticmethod
    async def create_feed(
        db: AsyncSession,
        user: User,
        name: str,
        url: str,
    ) -> Tuple[Feed, FeedFollow]:
        """
        Register a feed owned by ``user`` and follow it on their behalf.

        The feed and the follow are committed together; if either insert
        fails neither row is kept.

        Returns:
            Tuple of (created Feed, created FeedFollow)

        Raises:
            ConflictError: If a feed with this URL already exists
            InternalError: If the store rejects the writes
        """
        user_id = user.id
        now = get_utc_now()
        feed = Feed(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            name=name,
            url=url,
            user_id=user_id,
        )
        feed_follow = FeedFollow(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            user_id=user_id,
            feed_id=feed.id,
        )

        try:
            db.add(feed)
            # Feed row must exist before the follow references it
            await db.flush()
            db.add(feed_follow)
            await db.commit()
        except IntegrityError as e:
            # A failed flush expires every loaded object, user included
            await db.rollback()
            logger.warning(f"User {user_id} tried to register duplicate feed {url}: {e}")
            raise ConflictError("Feed with this URL already exists")
        except SQLAlchemyError as e:
            logger.error(f"Error creating feed {url}: {e}")
            await db.rollback()
            raise InternalError("Could not create feed")

        await db.refresh(feed)
        await db.refresh(feed_follow)

        logger.info(f"User {user_id} registered feed '{feed.name}' ({feed.id})")
        return feed, feed_follow

    @staticmethod
    async def list_feeds(db: AsyncSession) -> List[Feed]:
        """Return every feed, oldest first."""
        try:
            result = await db.execute(
                select(Feed).order_by(Feed.created_at, Feed.id)
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing feeds: {e}")
            raise InternalError("Could not get feeds")

        return list(result.scalars().all())
