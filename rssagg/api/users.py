from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rssagg.core.auth import get_current_user
from rssagg.core.database import get_db
from rssagg.models import User
from rssagg.schemas import UserCreate, UserResponse
from rssagg.services import user_service

router = APIRouter(prefix="/v1", tags=["Users"])


@router.post(
    "/users",
    response_model=UserResponse,
    summary="Create User",
    description="Register a new user. The response carries the API key used for all authenticated calls.",
)
async def create_user(
    params: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    return await user_service.create_user(db, params.name)


@router.get(
    "/users",
    response_model=UserResponse,
    summary="Get Current User",
    description="Return the user owning the API key in the `Authorization: ApiKey <key>` header.",
)
async def get_user(user: User = Depends(get_current_user)):
    return user
