import pytest
from fastapi.testclient import TestClient

from snapgram.main import app
from snapgram.api.deps import get_comment_store, get_current_user
from snapgram.schemas.user import CurrentUser
from snapgram.services.async_comment_store import AsyncCommentStore
from snapgram.services.async_user_directory import AsyncUserDirectory
from tests.async_test_utils import InMemoryDocumentCollection


@pytest.fixture
def collection():
    """In-memory remote store with two known users."""
    collection = InMemoryDocumentCollection()
    collection.add_user("u1", "Alice")
    collection.add_user("u2", "Bob")
    return collection


@pytest.fixture
def user_directory(collection):
    return AsyncUserDirectory(collection, users_collection="users", timeout_seconds=1.0)


@pytest.fixture
def comment_store(collection, user_directory):
    return AsyncCommentStore(
        collection,
        user_directory,
        comments_collection="comments",
        fallback_user_name="Unknown User",
        timeout_seconds=1.0,
        lookup_concurrency=10,
    )


@pytest.fixture
def alice():
    return CurrentUser(id="u1", name="Alice")


@pytest.fixture
def bob():
    return CurrentUser(id="u2", name="Bob")


@pytest.fixture
def client(comment_store, alice):
    """Test client wired to the in-memory store, authenticated as Alice."""
    app.dependency_overrides[get_comment_store] = lambda: comment_store
    app.dependency_overrides[get_current_user] = lambda: alice
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(comment_store):
    """Test client wired to the in-memory store, with the real auth dependency."""
    app.dependency_overrides[get_comment_store] = lambda: comment_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
