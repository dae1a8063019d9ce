"""Tests router FastAPI — render, validate, catalog, page article."""
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from blog_renderer.cms.models import Article, ArticleResponse
from blog_renderer.core.errors import ArticleNotFound, CMSRequestError, CMSResponseError
from blog_renderer.router import get_client, router


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def cms(app):
    mock = MagicMock()
    mock.base_url = "http://cms.test"
    app.dependency_overrides[get_client] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


# ── Rendu ───────────────────────────────────────────────────────────────────

def test_render_returns_one_fragment_per_block(client, raw_blocks):
    blocks = raw_blocks + [{"__component": "shared.quote", "id": 9}]
    r = client.post("/blog/render", json={"blocks": blocks})
    assert r.status_code == 200
    out = r.json()["blocks"]
    assert len(out) == 9
    assert [b["block_id"] for b in out] == list(range(1, 10))
    assert out[-1]["error"]["kind"] == "missing_required_field"
    assert out[0]["error"] is None


def test_render_strict_returns_422(client):
    r = client.post("/blog/render", json={
        "blocks": [{"__component": "shared.embed", "id": 3, "url": "https://x.test", "aspectRatio": "2:1"}],
        "strict": True,
    })
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail["kind"] == "invalid_enum_value"
    assert detail["block_id"] == 3


def test_render_html(client, raw_blocks):
    r = client.post("/blog/render.html", json={"blocks": raw_blocks})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.text.startswith('<div class="content-renderer">')


def test_render_html_strict_422(client):
    r = client.post("/blog/render.html", json={"blocks": [{"id": 1}], "strict": True})
    assert r.status_code == 422
    assert r.json()["detail"]["field"] == "__component"


# ── Validation / catalogue ──────────────────────────────────────────────────

def test_validate_separates_errors_and_warnings(client):
    r = client.post("/blog/validate", json={"blocks": [
        {"__component": "shared.rich-text", "id": 1, "body": "ok"},
        {"__component": "shared.poll", "id": 2},
        {"__component": "shared.code-block", "id": 3, "code": "x", "language": "cobol"},
    ]})
    body = r.json()
    assert body["valid"] is False
    assert [e["kind"] for e in body["errors"]] == ["invalid_enum_value"]
    assert [w["kind"] for w in body["warnings"]] == ["unknown_block_type"]


def test_validate_valid_sequence(client, raw_blocks):
    body = client.post("/blog/validate", json={"blocks": raw_blocks}).json()
    assert body == {"valid": True, "errors": [], "warnings": []}


def test_catalog_lists_all_variants(client):
    blocks = client.get("/blog/catalog").json()["blocks"]
    assert len(blocks) == 8
    assert {b["component"] for b in blocks} >= {"shared.rich-text", "shared.table"}
    assert all("properties" in b["schema"] for b in blocks)


# ── Page article ────────────────────────────────────────────────────────────

def test_article_page(client, cms, article_v4):
    cms.get_article_by_slug.return_value = ArticleResponse(data=Article.model_validate(article_v4))
    cms.get_global.side_effect = CMSRequestError(500, "Internal Server Error", "http://cms.test/api/global")
    r = client.get("/blog/articles/hello-strapi")
    assert r.status_code == 200
    assert "Hello, Strapi!" in r.text
    cms.get_article_by_slug.assert_called_once_with("hello-strapi")


def test_article_page_not_found(client, cms):
    cms.get_article_by_slug.side_effect = ArticleNotFound("nope")
    assert client.get("/blog/articles/nope").status_code == 404


def test_article_page_cms_down(client, cms):
    cms.get_article_by_slug.side_effect = CMSRequestError(None, "refused", "http://cms.test/api/articles")
    assert client.get("/blog/articles/x").status_code == 502


def test_article_page_invalid_cms_payload(client, cms):
    cms.get_article_by_slug.side_effect = CMSResponseError("http://cms.test/api/articles", "title: Field required")
    assert client.get("/blog/articles/x").status_code == 502


def test_article_page_survives_invalid_global(client, cms, article_v4):
    cms.get_article_by_slug.return_value = ArticleResponse(data=Article.model_validate(article_v4))
    cms.get_global.side_effect = CMSResponseError("http://cms.test/api/global", "siteName: bad")
    r = client.get("/blog/articles/hello-strapi")
    assert r.status_code == 200
    assert "Hello, Strapi!" in r.text
