"""
API key authentication.

Requests authenticate with ``Authorization: ApiKey <key>``. The
``get_current_user`` dependency resolves the key to a ``User`` and hands it
to the route as a regular parameter.
"""

import logging
from typing import Mapping, Optional

from fastapi import Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.database import get_db
from rssagg.core.exceptions import UnauthenticatedError, NotFoundError
from rssagg.models import User

logger = logging.getLogger(__name__)

API_KEY_SCHEME = "ApiKey"


def parse_auth_header(headers: Mapping[str, str], scheme: str = API_KEY_SCHEME) -> str:
    """
    Extract the credential from an Authorization header.

    Args:
        headers: Request headers (case-insensitive mapping)
        scheme: Expected scheme token, compared case-sensitively

    Returns:
        The credential token

    Raises:
        UnauthenticatedError: If the header is absent, empty or malformed
    """
    auth_header: Optional[str] = headers.get("Authorization")
    if not auth_header:
        raise UnauthenticatedError("no auth header included in request")

    split_auth = auth_header.split(" ")
    if len(split_auth) < 2 or split_auth[0] != scheme:
        raise UnauthenticatedError("malformed authorization header")

    return split_auth[1]


async def get_user_by_api_key(db: AsyncSession, api_key: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.api_key == api_key))
    return result.scalar_one_or_none()


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the request's API key to a user."""
    api_key = parse_auth_header(request.headers)

    user = await get_user_by_api_key(db, api_key)
    if user is None:
        # Unknown keys surface as 404, not 401
        raise NotFoundError("Could not get user")

    return user
