"""
Comment business logic.

Posting runs three ordered checks (payload shape, article existence, user
existence) and stops at the first failure. Shape is enforced by
`schemas.NewCommentRequest` before this module is reached.
"""

from __future__ import annotations

from news_api.articles import repository as articles_repository
from news_api.core.db import Database
from news_api.core.errors import NotFoundError
from news_api.core.validation import parse_article_id
from news_api.users import repository as users_repository

from . import repository, schemas


async def list_comments(database: Database, raw_article_id: str) -> list[dict]:
    article_id = parse_article_id(raw_article_id)

    rows = await repository.list_comments_for_article(database, article_id)
    if rows:
        return rows

    # No comments: either the article has none, or it does not exist.
    if not await articles_repository.article_exists(database, article_id):
        raise NotFoundError(f"article {article_id} does not exist")
    return []


async def add_comment(
    database: Database,
    raw_article_id: str,
    payload: schemas.NewCommentRequest,
) -> dict:
    article_id = parse_article_id(raw_article_id)

    if not await articles_repository.article_exists(database, article_id):
        raise NotFoundError(f"article {article_id} does not exist")

    user = await users_repository.get_user_by_username(database, payload.username)
    if user is None:
        raise NotFoundError(f"username {payload.username} does not exist")

    return await repository.insert_comment(
        database,
        article_id=article_id,
        author=payload.username,
        body=payload.body,
    )
