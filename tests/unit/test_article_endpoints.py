"""HTTP-level tests for the article endpoints, backed by a stub repository."""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from articles.application.interfaces import ArticleRepository
from articles.application.services import ArticleService
from articles.domain.entities import Article
from articles.domain.exceptions import ArticleNotFoundError, PersistenceError
from articles.main import create_app

CREATED_AT = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


# ── Fakes ────────────────────────────────────────────────────────────


class StubArticleRepository(ArticleRepository):
    """Returns canned results and records every call."""

    def __init__(self, save_result: Article | Exception | None = None, get_result: Article | Exception | None = None):
        self._save_result = save_result
        self._get_result = get_result
        self.saved: list[Article] = []
        self.requested_ids: list[int] = []

    async def save(self, article: Article) -> Article:
        self.saved.append(article)
        return self._resolve(self._save_result)

    async def get_by_id(self, article_id: int) -> Article:
        self.requested_ids.append(article_id)
        return self._resolve(self._get_result)

    @staticmethod
    def _resolve(result: Article | Exception | None) -> Article:
        if result is None:
            raise AssertionError("repository was not expected to be called")
        if isinstance(result, Exception):
            raise result
        return result


def _client(repository: ArticleRepository, **kwargs) -> AsyncClient:
    app = create_app(ArticleService(repository))
    return AsyncClient(transport=ASGITransport(app=app, **kwargs), base_url="http://test")


# ── POST /article ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_article_returns_201():
    repository = StubArticleRepository(save_result=Article(id=1, title="Hello", created_at=CREATED_AT))

    async with _client(repository) as client:
        response = await client.post("/article", json={"title": "  Hello  "})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "title": "Hello", "created_at": "2024-05-01T12:30:00Z"}
    assert [a.title for a in repository.saved] == ["Hello"]


@pytest.mark.asyncio
async def test_create_article_blank_title():
    repository = StubArticleRepository()

    async with _client(repository) as client:
        response = await client.post("/article", json={"title": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "title is required"}
    assert repository.saved == []


@pytest.mark.asyncio
async def test_create_article_missing_title_is_treated_as_blank():
    async with _client(StubArticleRepository()) as client:
        response = await client.post("/article", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "title is required"}


@pytest.mark.asyncio
async def test_create_article_null_title_is_treated_as_blank():
    repository = StubArticleRepository()

    async with _client(repository) as client:
        response = await client.post("/article", json={"title": None})

    assert response.status_code == 400
    assert response.json() == {"error": "title is required"}
    assert repository.saved == []


@pytest.mark.asyncio
async def test_create_article_title_too_long():
    async with _client(StubArticleRepository()) as client:
        response = await client.post("/article", json={"title": "a" * 141})

    assert response.status_code == 400
    assert "title must be at most 140 characters" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [b'{"title":', b"not json", b'["title"]', b'{"title": 42}', b"", b'{"title": "\xff\xfe"}'],
)
async def test_create_article_malformed_body(body: bytes):
    repository = StubArticleRepository()

    async with _client(repository) as client:
        response = await client.post(
            "/article",
            content=body,
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert repository.saved == []


@pytest.mark.asyncio
async def test_create_article_persistence_failure_is_hidden():
    failure = PersistenceError("create article", RuntimeError("password authentication failed"))
    repository = StubArticleRepository(save_result=failure)

    async with _client(repository) as client:
        response = await client.post("/article", json={"title": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}
    assert "password" not in response.text


@pytest.mark.asyncio
async def test_create_article_unexpected_error_is_hidden():
    repository = StubArticleRepository(save_result=RuntimeError("boom"))

    async with _client(repository, raise_app_exceptions=False) as client:
        response = await client.post("/article", json={"title": "Hello"})

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}


# ── GET /article/{id} ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_article_returns_200():
    repository = StubArticleRepository(get_result=Article(id=2, title="Hello", created_at=CREATED_AT))

    async with _client(repository) as client:
        response = await client.get("/article/2")

    assert response.status_code == 200
    assert response.json() == {"id": 2, "title": "Hello", "created_at": "2024-05-01T12:30:00Z"}
    assert repository.requested_ids == [2]


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["not-a-number", "0", "-5", "1.5", "12abc", "99999999999999999999"])
async def test_get_article_invalid_id(raw_id: str):
    repository = StubArticleRepository()

    async with _client(repository) as client:
        response = await client.get(f"/article/{raw_id}")

    assert response.status_code == 400
    assert response.json() == {"error": "id must be a positive integer"}
    assert repository.requested_ids == []


@pytest.mark.asyncio
async def test_get_article_not_found():
    repository = StubArticleRepository(get_result=ArticleNotFoundError(404))

    async with _client(repository) as client:
        response = await client.get("/article/404")

    assert response.status_code == 404
    assert response.json() == {"error": "article not found"}


@pytest.mark.asyncio
async def test_get_article_persistence_failure_is_hidden():
    failure = PersistenceError("get article by id 1", RuntimeError("connection refused"))
    repository = StubArticleRepository(get_result=failure)

    async with _client(repository) as client:
        response = await client.get("/article/1")

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}


# ── Routing errors ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_unknown_route_uses_error_body():
    async with _client(StubArticleRepository()) as client:
        response = await client.get("/articles")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


@pytest.mark.asyncio
async def test_wrong_method_uses_error_body():
    async with _client(StubArticleRepository()) as client:
        response = await client.delete("/article/1")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert "allow" in response.headers
