"""Script to register a user from the command line and print its API key"""
import asyncio
import sys

from rssagg.core.database import AsyncSessionLocal
from rssagg.services.user_service import create_user


async def main(name: str):
    async with AsyncSessionLocal() as db:
        user = await create_user(db, name)
        print(f"Created user: {user.name} (ID: {user.id})")
        print(f"API key: {user.api_key}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python create_user.py <name>")
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
