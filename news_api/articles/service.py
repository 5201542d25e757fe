"""
Article business logic.

Validation runs before any storage call; existence checks run after one.
"""

from __future__ import annotations

from typing import Any

from news_api.core.db import Database
from news_api.core.errors import BadRequestError, NotFoundError
from news_api.core.validation import parse_article_id
from news_api.topics import repository as topics_repository

from . import queries, repository


def _with_comment_count(row: dict[str, Any]) -> dict[str, Any]:
    # comment_count is served as a digit string, e.g. "11".
    article = dict(row)
    article["comment_count"] = str(int(row.get("comment_count") or 0))
    return article


async def list_articles(
    database: Database,
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict]:
    # Topic existence first, then sort column, then direction.
    if topic is not None and not await topics_repository.topic_exists(database, topic):
        raise NotFoundError(f"{topic} does not exist")

    queries.resolve_sort(sort_by, order)

    rows = await repository.list_articles(database, topic=topic, sort_by=sort_by, order=order)
    return [_with_comment_count(row) for row in rows]


async def get_article(database: Database, raw_article_id: str) -> dict:
    article_id = parse_article_id(raw_article_id)

    row = await repository.get_article_by_id(database, article_id)
    if row is None:
        raise NotFoundError(f"article {article_id} does not exist")
    return _with_comment_count(row)


async def update_votes(database: Database, raw_article_id: str, inc_votes: int | None) -> dict:
    article_id = parse_article_id(raw_article_id)

    # A zero delta is rejected along with a missing one.
    if not inc_votes:
        raise BadRequestError()

    row = await repository.increment_votes(database, article_id, inc_votes)
    if row is None:
        raise NotFoundError("article does not exist")
    return row
