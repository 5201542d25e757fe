"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from news_api.core.db import Database, get_database

from . import repository

router = APIRouter()


@router.get("/api/topics")
async def get_topics(database: Database = Depends(get_database)) -> dict:
    topics = await repository.list_topics(database)
    return {"topics": topics}
