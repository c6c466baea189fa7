import os

# must be set before blogexpress.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BROADCAST_ENABLED"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from blogexpress.db import create_tables, drop_tables, get_session_factory
from blogexpress.main import app
from blogexpress.services.broadcaster import broadcaster


@pytest.fixture(autouse=True)
def fresh_database():
    drop_tables()
    create_tables()
    broadcaster.clear()
    yield


@pytest.fixture
def db_session():
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


def make_user(client, **overrides):
    n = overrides.pop("n", 1)
    body = {
        "username": f"writer{n}",
        "password": "secret",
        "name": f"Writer {n}",
        "email": f"writer{n}@example.com",
    }
    body.update(overrides)
    res = client.post("/api/users", json=body)
    assert res.status_code == 201, res.text
    return res.json()


def make_category(client, **overrides):
    n = overrides.pop("n", 1)
    body = {"name": f"Category {n}", "slug": f"category-{n}", "description": "demo"}
    body.update(overrides)
    res = client.post("/api/categories", json=body)
    assert res.status_code == 201, res.text
    return res.json()


def make_post(client, category_id, author_id, **overrides):
    n = overrides.pop("n", 1)
    body = {
        "title": f"Post {n}",
        "slug": f"post-{n}",
        "content": "Lorem ipsum",
        "categoryId": category_id,
        "authorId": author_id,
    }
    body.update(overrides)
    res = client.post("/api/posts", json=body)
    assert res.status_code == 201, res.text
    return res.json()


def make_comment(client, post_id, author_id, **overrides):
    body = {"content": "Nice post", "postId": post_id, "authorId": author_id}
    body.update(overrides)
    res = client.post("/api/comments", json=body)
    assert res.status_code == 201, res.text
    return res.json()
