"""
User service: registration of new users.
"""

import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.exceptions import InternalError
from rssagg.models.user import User, get_utc_now, generate_api_key

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, name: str) -> User:
    """
    Register a new user with a freshly issued API key.

    Args:
        db: Database session
        name: Display name, stored as given

    Returns:
        The created User

    Raises:
        InternalError: If the insert fails
    """
    now = get_utc_now()
    user = User(
        id=uuid.uuid4(),
        created_at=now,
        updated_at=now,
        name=name,
        api_key=generate_api_key(),
    )

    try:
        db.add(user)
        await db.commit()
        await db.refresh(user)
    except SQLAlchemyError as e:
        logger.error(f"Error creating user {name!r}: {e}")
        await db.rollback()
        raise InternalError("Could not create user")

    logger.info(f"Created user {user.id}")
    return user
