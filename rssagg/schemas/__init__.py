from .user import UserCreate, UserResponse
from .feed_follow import FeedFollowCreate, FeedFollowResponse
from .feed import FeedCreate, FeedResponse, FeedWithFollowResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "FeedCreate",
    "FeedResponse",
    "FeedWithFollowResponse",
    "FeedFollowCreate",
    "FeedFollowResponse",
]
