"""
Comment API endpoints (nested under articles).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from news_api.core.db import Database, get_database

from . import schemas, service

router = APIRouter()


@router.get("/api/articles/{article_id}/comments")
async def get_comments_by_article(
    article_id: str,
    database: Database = Depends(get_database),
) -> dict:
    """
    Comments for one article, newest first. An article with no comments
    returns an empty list.
    """
    comments = await service.list_comments(database, article_id)
    return {"comments": comments}


@router.post("/api/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_comment_to_article(
    article_id: str,
    request: schemas.NewCommentRequest,
    database: Database = Depends(get_database),
) -> dict:
    comment = await service.add_comment(database, article_id, request)
    return {"comment": comment}
