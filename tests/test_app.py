"""
App-level tests: topics/users listings, unmatched paths, health check, and
how storage errors surface through the error handlers.
"""

import logging

import asyncpg
import pytest
from fastapi.testclient import TestClient

from news_api.core.config import Settings
from news_api.core.db import Database
from news_api.main import create_app
from news_api.topics import repository as topics_repository


class TestTopics:
    def test_lists_topics(self, client):
        resp = client.get("/api/topics")
        assert resp.status_code == 200
        topics = resp.json()["topics"]
        assert len(topics) == 3
        for topic in topics:
            assert set(topic) == {"slug", "description"}
        assert {t["slug"] for t in topics} == {"mitch", "cats", "paper"}


class TestUsers:
    def test_lists_users(self, client):
        resp = client.get("/api/users")
        assert resp.status_code == 200
        users = resp.json()["users"]
        assert len(users) == 4
        for user in users:
            assert set(user) == {"username", "name", "avatar_url"}


class TestUnmatchedPaths:
    @pytest.mark.parametrize("path", ["/api/pathnotvalid", "/api", "/", "/api/articles/1/votes"])
    def test_get_unknown_path(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 404
        assert resp.json() == {"msg": "path not found"}

    def test_unsupported_method_on_known_path(self, client):
        resp = client.delete("/api/topics")
        assert resp.status_code == 404
        assert resp.json() == {"msg": "path not found"}

    def test_post_unknown_path(self, client):
        resp = client.post("/api/nothing", json={})
        assert resp.status_code == 404
        assert resp.json() == {"msg": "path not found"}


class TestHealth:
    def test_health_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestErrorHandling:
    def test_driver_data_error_is_400(self, client, monkeypatch):
        async def broken(database):
            raise asyncpg.exceptions.InvalidTextRepresentationError("invalid input syntax")

        monkeypatch.setattr(topics_repository, "list_topics", broken)
        resp = client.get("/api/topics")
        assert resp.status_code == 400
        assert resp.json() == {"msg": "bad request"}

    def test_unexpected_error_is_500(self, client, monkeypatch, caplog):
        async def broken(database):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(topics_repository, "list_topics", broken)
        resp = client.get("/api/topics")
        assert resp.status_code == 500
        assert resp.json() == {"msg": "internal server error"}
        assert "connection reset" not in resp.text
        assert "unhandled_error type=RuntimeError" in caplog.text

    def test_pool_not_opened_is_500(self, app):
        # Without the store fixture the real repository hits the unopened pool.
        with_real_repository = TestClient(app, raise_server_exceptions=False)
        resp = with_real_repository.get("/api/users")
        assert resp.status_code == 500
        assert resp.json() == {"msg": "internal server error"}


class TestRequestLogging:
    def test_access_line_for_success(self, client, caplog):
        caplog.set_level(logging.INFO, logger="news_api.main")
        client.get("/api/topics")
        assert "method=GET path=/api/topics status=200" in caplog.text

    def test_access_line_for_unhandled_error(self, client, monkeypatch, caplog):
        async def broken(database):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(topics_repository, "list_topics", broken)
        caplog.set_level(logging.INFO, logger="news_api.main")
        resp = client.get("/api/topics")
        assert resp.status_code == 500
        access = [r for r in caplog.records if getattr(r, "path", None) == "/api/topics"]
        assert len(access) == 1
        assert access[0].status == 500
        assert "status=500" in access[0].getMessage()

    def test_create_app_leaves_root_handlers_alone(self):
        root = logging.getLogger()
        before = list(root.handlers)
        create_app(
            database=Database("postgresql://unused/news"),
            settings=Settings(log_format="json"),
        )
        assert root.handlers == before
