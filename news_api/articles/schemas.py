"""
Pydantic schemas for article endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class VoteUpdateRequest(BaseModel):
    # Optional here so a missing key reaches the service's falsy check.
    inc_votes: int | None = Field(default=None, ge=-2_147_483_648, le=2_147_483_647)

    @field_validator("inc_votes", mode="before")
    @classmethod
    def reject_bool(cls, value):
        # Lax int parsing would turn true/false into 1/0.
        if isinstance(value, bool):
            raise ValueError("inc_votes must be an integer")
        return value
