from .user import User
from .feed import Feed
from .feed_follow import FeedFollow

__all__ = ["User", "Feed", "FeedFollow"]
