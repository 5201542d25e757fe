"""
Pytest fixtures for the news API tests.

API tests run without Postgres: the repository functions are replaced with an
in-memory store built from the bundled dataset (`news_api/db/test_data.py`).
"""

from __future__ import annotations

import copy
from datetime import datetime

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from news_api.articles import queries  # noqa: E402
from news_api.articles import repository as articles_repository  # noqa: E402
from news_api.comments import repository as comments_repository  # noqa: E402
from news_api.core.config import Settings  # noqa: E402
from news_api.core.db import Database  # noqa: E402
from news_api.db import test_data  # noqa: E402
from news_api.main import create_app  # noqa: E402
from news_api.topics import repository as topics_repository  # noqa: E402
from news_api.users import repository as users_repository  # noqa: E402

_SORT_KEYS = {
    "article_id": lambda a: a["article_id"],
    "author": lambda a: a["author"],
    "title": lambda a: a["title"],
    "topic": lambda a: a["topic"],
    "created_at": lambda a: a["created_at"],
    "votes": lambda a: a["votes"],
    "comment_count": lambda a: a["comment_count"],
}


class InMemoryStore:
    """Mirrors the repository functions' signatures over plain lists."""

    def __init__(self) -> None:
        self.topics = copy.deepcopy(test_data.TOPICS)
        self.users = copy.deepcopy(test_data.USERS)
        self.articles = [
            {"article_id": i, **a} for i, a in enumerate(copy.deepcopy(test_data.ARTICLES), start=1)
        ]
        self.comments = [
            {"comment_id": i, **c} for i, c in enumerate(copy.deepcopy(test_data.COMMENTS), start=1)
        ]
        self.calls: list[str] = []

    def _comment_count(self, article_id: int) -> int:
        return sum(1 for c in self.comments if c["article_id"] == article_id)

    def _find_article(self, article_id: int) -> dict | None:
        return next((a for a in self.articles if a["article_id"] == article_id), None)

    async def list_topics(self, database):
        self.calls.append("list_topics")
        return [dict(t) for t in self.topics]

    async def topic_exists(self, database, slug):
        self.calls.append("topic_exists")
        return any(t["slug"] == slug for t in self.topics)

    async def list_users(self, database):
        self.calls.append("list_users")
        return [dict(u) for u in self.users]

    async def get_user_by_username(self, database, username):
        self.calls.append("get_user_by_username")
        return next((dict(u) for u in self.users if u["username"] == username), None)

    async def list_articles(self, database, *, topic=None, sort_by=None, order=None):
        self.calls.append("list_articles")
        queries.resolve_sort(sort_by, order)
        rows = [
            {
                "article_id": a["article_id"],
                "author": a["author"],
                "title": a["title"],
                "topic": a["topic"],
                "created_at": a["created_at"],
                "votes": a["votes"],
                "comment_count": self._comment_count(a["article_id"]),
            }
            for a in self.articles
            if topic is None or a["topic"] == topic
        ]
        rows.sort(
            key=_SORT_KEYS[sort_by or queries.DEFAULT_SORT_BY],
            reverse=(order or queries.DEFAULT_ORDER) == "desc",
        )
        return rows

    async def get_article_by_id(self, database, article_id):
        self.calls.append("get_article_by_id")
        article = self._find_article(article_id)
        if article is None:
            return None
        return {**article, "comment_count": self._comment_count(article_id)}

    async def article_exists(self, database, article_id):
        self.calls.append("article_exists")
        return self._find_article(article_id) is not None

    async def increment_votes(self, database, article_id, inc_votes):
        self.calls.append("increment_votes")
        article = self._find_article(article_id)
        if article is None:
            return None
        article["votes"] += inc_votes
        return dict(article)

    async def list_comments_for_article(self, database, article_id):
        self.calls.append("list_comments_for_article")
        rows = [
            {k: c[k] for k in ("comment_id", "votes", "created_at", "author", "body")}
            for c in self.comments
            if c["article_id"] == article_id
        ]
        rows.sort(key=lambda c: c["created_at"], reverse=True)
        return rows

    async def insert_comment(self, database, *, article_id, author, body):
        self.calls.append("insert_comment")
        comment = {
            "comment_id": len(self.comments) + 1,
            "body": body,
            "article_id": article_id,
            "author": author,
            "votes": 0,
            "created_at": datetime.now(),
        }
        self.comments.append(comment)
        return dict(comment)


@pytest.fixture()
def store(monkeypatch):
    fake = InMemoryStore()
    for module, names in (
        (topics_repository, ("list_topics", "topic_exists")),
        (users_repository, ("list_users", "get_user_by_username")),
        (
            articles_repository,
            ("list_articles", "get_article_by_id", "article_exists", "increment_votes"),
        ),
        (comments_repository, ("list_comments_for_article", "insert_comment")),
    ):
        for name in names:
            monkeypatch.setattr(module, name, getattr(fake, name))
    return fake


@pytest.fixture()
def app():
    # The pool is never opened: the lifespan only runs inside `with TestClient(...)`.
    return create_app(database=Database("postgresql://unused/news"), settings=Settings())


@pytest.fixture()
def client(app, store):
    return TestClient(app, raise_server_exceptions=False)
