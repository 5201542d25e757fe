"""
Drop, recreate and populate the schema.

Usage:
    DATABASE_URL=postgresql://... python -m news_api.db.seed
    news-api-seed --database-url postgresql://...
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from types import ModuleType

from news_api.core.config import Settings
from news_api.core.db import Database
from news_api.core.logging import configure_logging

from . import test_data

logger = logging.getLogger(__name__)

DROP_TABLES_SQL = [
    "DROP TABLE IF EXISTS comments;",
    "DROP TABLE IF EXISTS articles;",
    "DROP TABLE IF EXISTS users;",
    "DROP TABLE IF EXISTS topics;",
]

CREATE_TABLES_SQL = [
    """
    CREATE TABLE topics (
        slug VARCHAR PRIMARY KEY,
        description VARCHAR NOT NULL
    );
    """,
    """
    CREATE TABLE users (
        username VARCHAR PRIMARY KEY,
        name VARCHAR NOT NULL,
        avatar_url VARCHAR
    );
    """,
    """
    CREATE TABLE articles (
        article_id SERIAL PRIMARY KEY,
        title VARCHAR NOT NULL,
        topic VARCHAR NOT NULL REFERENCES topics(slug),
        author VARCHAR NOT NULL REFERENCES users(username),
        body VARCHAR NOT NULL,
        created_at TIMESTAMP DEFAULT NOW(),
        votes INT NOT NULL DEFAULT 0
    );
    """,
    """
    CREATE TABLE comments (
        comment_id SERIAL PRIMARY KEY,
        body VARCHAR NOT NULL,
        article_id INT NOT NULL REFERENCES articles(article_id),
        author VARCHAR NOT NULL REFERENCES users(username),
        votes INT NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT NOW()
    );
    """,
]


async def seed(database: Database, data: ModuleType = test_data) -> None:
    """
    Rebuild all tables and load `data` (a module exposing TOPICS, USERS,
    ARTICLES and COMMENTS) inside one transaction.
    """
    async with database.acquire() as conn:
        async with conn.transaction():
            for stmt in DROP_TABLES_SQL + CREATE_TABLES_SQL:
                await conn.execute(stmt)

            await conn.executemany(
                "INSERT INTO topics (slug, description) VALUES ($1, $2)",
                [(t["slug"], t["description"]) for t in data.TOPICS],
            )
            await conn.executemany(
                "INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)",
                [(u["username"], u["name"], u["avatar_url"]) for u in data.USERS],
            )
            await conn.executemany(
                """
                INSERT INTO articles (title, topic, author, body, created_at, votes)
                VALUES ($1, $2, $3, $4, $5, $6)
                """,
                [
                    (a["title"], a["topic"], a["author"], a["body"], a["created_at"], a["votes"])
                    for a in data.ARTICLES
                ],
            )
            await conn.executemany(
                """
                INSERT INTO comments (body, author, article_id, votes, created_at)
                VALUES ($1, $2, $3, $4, $5)
                """,
                [
                    (c["body"], c["author"], c["article_id"], c["votes"], c["created_at"])
                    for c in data.COMMENTS
                ],
            )

    logger.info(
        "seeded topics=%d users=%d articles=%d comments=%d",
        len(data.TOPICS),
        len(data.USERS),
        len(data.ARTICLES),
        len(data.COMMENTS),
    )


async def seed_url(dsn: str, data: ModuleType = test_data) -> None:
    database = Database(dsn, min_size=1, max_size=1)
    await database.connect()
    try:
        await seed(database, data)
    finally:
        await database.close()


def main(argv: list[str] | None = None) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Recreate and seed the news database.")
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Postgres DSN (default: $DATABASE_URL)",
    )
    args = parser.parse_args(argv)

    configure_logging(level=settings.log_level, fmt=settings.log_format)
    asyncio.run(seed_url(args.database_url))


if __name__ == "__main__":
    main()
