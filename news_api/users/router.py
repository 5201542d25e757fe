"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from news_api.core.db import Database, get_database

from . import repository

router = APIRouter()


@router.get("/api/users")
async def get_users(database: Database = Depends(get_database)) -> dict:
    users = await repository.list_users(database)
    return {"users": users}
