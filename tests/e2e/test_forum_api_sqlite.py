"""End-to-end tests for the forum HTTP API on a real SQLite database."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import use_temporary_database


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create test client backed by a temporary SQLite database."""
    use_temporary_database(monkeypatch, tmp_path)
    app_instance = create_app(build_test_container(unmock={"persistence"}))
    # One client context keeps every request on the same event loop
    with TestClient(app_instance) as test_client:
        yield test_client


class TestForumOnSqlite:
    """Requests commit their work, so later requests observe it."""

    def test_writes_are_visible_to_later_requests(self, client):
        # Arrange
        client.post("/topics", json={"id": "science"})
        post = client.post(
            "/topics/science/posts", json={"title": "Hello", "content": "World"}
        ).json()
        base = f"/topics/science/posts/{post['id']}"
        client.post(f"{base}/comments", json={"content": "First"})

        # Act
        client.post(f"{base}/upvote")
        topic = client.get(
            "/topics/science", params={"expand": "posts.comments"}
        ).json()

        # Assert
        assert topic["posts"][0]["votes"] == 1
        assert [c["content"] for c in topic["posts"][0]["comments"]] == ["First"]

    def test_conflict_does_not_break_later_requests(self, client):
        client.post("/topics", json={"id": "science"})

        conflict = client.post("/topics", json={"id": "science"})
        listed = client.get("/topics")

        assert conflict.status_code == 409
        assert [t["id"] for t in listed.json()["topics"]] == ["science"]
