"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from news_api.core.db import Database


async def list_comments_for_article(database: Database, article_id: int) -> list[dict]:
    return await database.fetch_all(
        """
        SELECT comment_id, votes, created_at, author, body
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC
        """,
        article_id,
    )


async def insert_comment(database: Database, *, article_id: int, author: str, body: str) -> dict:
    row = await database.fetch_one(
        """
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING *
        """,
        article_id,
        author,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row
