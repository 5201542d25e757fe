"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NewCommentRequest(BaseModel):
    # Exactly these two keys; anything else is a bad request.
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
