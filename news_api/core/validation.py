"""
Path-parameter validation shared by the article-scoped endpoints.
"""

from __future__ import annotations

from news_api.core.errors import BadRequestError

# Upper bound of a Postgres `integer` / `serial` column.
MAX_SERIAL_ID = 2_147_483_647


def parse_article_id(raw: str | None) -> int:
    """
    Return `raw` as a positive integer id, or raise BadRequestError.

    Only plain ASCII digit strings are accepted: "-1", "1.5", "abc" and
    "0" are all rejected before any lookup happens.
    """
    value = (raw or "").strip()
    if not value.isascii() or not value.isdigit():
        raise BadRequestError()

    article_id = int(value)
    if article_id < 1 or article_id > MAX_SERIAL_ID:
        raise BadRequestError()
    return article_id
