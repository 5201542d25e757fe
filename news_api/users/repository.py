"""
User persistence helpers.
"""

from __future__ import annotations

from news_api.core.db import Database


async def list_users(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        """
    )


async def get_user_by_username(database: Database, username: str) -> dict | None:
    return await database.fetch_one(
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
