"""
Integration tests for the comment endpoints, backed by the in-memory store.
"""

from fastapi import status

PREFIX = "/api/v1"


def test_list_comments_empty(client):
    response = client.get(f"{PREFIX}/posts/p1/comments")

    assert response.status_code == 200
    assert response.json() == {"post_id": "p1", "comments": [], "total_count": 0}


def test_post_then_list(client):
    response = client.post(f"{PREFIX}/posts/p1/comments", json={"content": "  hello  "})

    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["content"] == "hello"
    assert created["user_id"] == "u1"
    assert created["user_name"] == "Alice"
    assert created["post_id"] == "p1"

    listed = client.get(f"{PREFIX}/posts/p1/comments").json()
    assert listed["total_count"] == 1
    assert listed["comments"][0]["id"] == created["id"]
    assert listed["comments"][0]["user_name"] == "Alice"


def test_list_resolves_other_authors(client, collection):
    collection.seed_comment("c1", "p1", "u2", "from bob", "2026-01-01T00:00:00+00:00")
    collection.seed_comment("c2", "p1", "gone", "from nobody", "2026-01-02T00:00:00+00:00")

    comments = client.get(f"{PREFIX}/posts/p1/comments").json()["comments"]

    assert [c["user_name"] for c in comments] == ["Bob", "Unknown User"]


def test_post_blank_comment_rejected(client, collection):
    response = client.post(f"{PREFIX}/posts/p1/comments", json={"content": "   "})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert collection.count_calls("create_record") == 0


def test_post_failure_returns_bad_gateway(client, collection):
    collection.fail("create_record")

    response = client.post(f"{PREFIX}/posts/p1/comments", json={"content": "hello"})

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    collection.recover("create_record")
    assert client.get(f"{PREFIX}/posts/p1/comments").json()["total_count"] == 0


def test_list_failure_returns_service_unavailable(client, collection):
    collection.fail("query_records")

    response = client.get(f"{PREFIX}/posts/p1/comments")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


def test_delete_comment(client):
    created = client.post(f"{PREFIX}/posts/p1/comments", json={"content": "bye"}).json()

    response = client.delete(f"{PREFIX}/comments/{created['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"{PREFIX}/posts/p1/comments").json()["comments"] == []


def test_delete_missing_comment(client):
    response = client.delete(f"{PREFIX}/comments/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_writes_require_token(anonymous_client):
    assert anonymous_client.post(f"{PREFIX}/posts/p1/comments", json={"content": "hi"}).status_code == 401
    assert anonymous_client.delete(f"{PREFIX}/comments/c1").status_code == 401


def test_reads_do_not_require_token(anonymous_client):
    assert anonymous_client.get(f"{PREFIX}/posts/p1/comments").status_code == 200


def test_health(client):
    response = client.get(f"{PREFIX}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
