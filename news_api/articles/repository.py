"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from news_api.core.db import Database

from . import queries


async def list_articles(
    database: Database,
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict]:
    sql, args = queries.build_list_articles_query(topic, sort_by, order)
    return await database.fetch_all(sql, *args)


async def get_article_by_id(database: Database, article_id: int) -> dict | None:
    return await database.fetch_one(
        """
        SELECT articles.*, COUNT(comments.comment_id) AS comment_count
        FROM articles
        LEFT JOIN comments ON comments.article_id = articles.article_id
        WHERE articles.article_id = $1
        GROUP BY articles.article_id
        """,
        article_id,
    )


async def article_exists(database: Database, article_id: int) -> bool:
    row = await database.fetch_one(
        """
        SELECT 1 AS ok
        FROM articles
        WHERE article_id = $1
        LIMIT 1
        """,
        article_id,
    )
    return row is not None


async def increment_votes(database: Database, article_id: int, inc_votes: int) -> dict | None:
    # Single statement so concurrent increments compose without app-level locking.
    return await database.fetch_one(
        """
        UPDATE articles
        SET votes = votes + $1
        WHERE article_id = $2
        RETURNING *
        """,
        inc_votes,
        article_id,
    )
