"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from news_api.core.db import Database, get_database

from . import schemas, service

router = APIRouter()


@router.get("/api/articles")
async def get_articles(
    topic: str | None = Query(default=None),
    sort_by: str | None = Query(default=None),
    order: str | None = Query(default=None),
    database: Database = Depends(get_database),
) -> dict:
    """
    List articles with their comment counts, optionally filtered by topic.
    """
    articles = await service.list_articles(
        database,
        topic=topic,
        sort_by=sort_by,
        order=order,
    )
    return {"articles": articles}


@router.get("/api/articles/{article_id}")
async def get_article_by_id(
    article_id: str,
    database: Database = Depends(get_database),
) -> dict:
    article = await service.get_article(database, article_id)
    return {"article": article}


@router.patch("/api/articles/{article_id}")
async def patch_article_by_id(
    article_id: str,
    request: schemas.VoteUpdateRequest,
    database: Database = Depends(get_database),
) -> dict:
    """
    Add `inc_votes` (may be negative) to the article's vote count.
    """
    updated = await service.update_votes(database, article_id, request.inc_votes)
    return {"updatedArticle": updated}
