"""
SQL builder for the article listing.

Caller-chosen sort column and direction are checked against fixed
allowlists before they are placed in the SQL text. The topic filter is
always a bound parameter.
"""

from __future__ import annotations

from typing import Any

from news_api.core.errors import BadRequestError

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

# sort_by value -> SQL expression used in ORDER BY
SORTABLE_COLUMNS = {
    "article_id": "articles.article_id",
    "author": "articles.author",
    "title": "articles.title",
    "topic": "articles.topic",
    "created_at": "articles.created_at",
    "votes": "articles.votes",
    "comment_count": "comment_count",
}

ORDER_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}

_LIST_SELECT = """
SELECT articles.article_id,
       articles.author,
       articles.title,
       articles.topic,
       articles.created_at,
       articles.votes,
       COUNT(comments.comment_id) AS comment_count
FROM articles
LEFT JOIN comments ON comments.article_id = articles.article_id
"""


def resolve_sort(sort_by: str | None, order: str | None) -> tuple[str, str]:
    """
    Validate `sort_by` / `order` and return their SQL tokens.

    Raises:
        BadRequestError: If either value is outside its allowlist.
    """
    sort_key = DEFAULT_SORT_BY if sort_by is None else sort_by
    order_key = DEFAULT_ORDER if order is None else order

    if sort_key not in SORTABLE_COLUMNS:
        raise BadRequestError()
    if order_key not in ORDER_DIRECTIONS:
        raise BadRequestError()
    return SORTABLE_COLUMNS[sort_key], ORDER_DIRECTIONS[order_key]


def build_list_articles_query(
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> tuple[str, list[Any]]:
    """Build the listing query and its positional arguments."""
    column, direction = resolve_sort(sort_by, order)

    args: list[Any] = []
    sql = _LIST_SELECT
    if topic is not None:
        args.append(topic)
        sql += f"WHERE articles.topic = ${len(args)}\n"

    sql += "GROUP BY articles.article_id\n"
    sql += f"ORDER BY {column} {direction}"
    return sql, args
