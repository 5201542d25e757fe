"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from news_api.core.db import Database


async def list_topics(database: Database) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT slug, description
        FROM topics
        """
    )


async def topic_exists(database: Database, slug: str) -> bool:
    row = await database.fetch_one(
        """
        SELECT 1 AS ok
        FROM topics
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )
    return row is not None
