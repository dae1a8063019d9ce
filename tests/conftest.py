"""Fixtures partagées — blocs Strapi bruts, image, article."""
import pytest


@pytest.fixture(autouse=True)
def strapi_env(monkeypatch):
    monkeypatch.setenv("STRAPI_URL", "http://cms.test")
    monkeypatch.delenv("STRAPI_API_TOKEN", raising=False)
    monkeypatch.delenv("STRAPI_TIMEOUT", raising=False)
    monkeypatch.delenv("BLOG_DEFAULT_IMAGE_FORMAT", raising=False)


@pytest.fixture
def image_v4():
    """Image au format Strapi v4 (relation {"data": {"id", "attributes"}})."""
    return {"data": {"id": 5, "attributes": {
        "name": "photo.jpg",
        "alternativeText": "A photo",
        "caption": "Sunset",
        "url": "/uploads/photo.jpg",
        "width": 1600,
        "height": 900,
        "formats": {
            "thumbnail": {"url": "/uploads/thumbnail_photo.jpg", "width": 245, "height": 138},
            "medium":    {"url": "/uploads/medium_photo.jpg", "width": 750, "height": 422},
        },
    }}}


@pytest.fixture
def raw_blocks(image_v4):
    """Une séquence couvrant les 8 variantes."""
    return [
        {"__component": "shared.rich-text", "id": 1, "body": "<p>Hello <strong>world</strong></p>"},
        {"__component": "shared.media", "id": 2, "file": image_v4},
        {"__component": "shared.quote", "id": 3, "body": "Simple is better", "title": "Tim Peters"},
        {"__component": "shared.slider", "id": 4, "files": {"data": [image_v4["data"]]}},
        {"__component": "shared.code-block", "id": 5, "code": "print('hi')", "language": "python"},
        {"__component": "shared.call-to-action", "id": 6, "title": "Subscribe", "url": "/subscribe"},
        {"__component": "shared.embed", "id": 7, "url": "https://vimeo.com/76979871"},
        {"__component": "shared.table", "id": 8, "headers": ["A", "B"], "rows": [["1", "2"]]},
    ]


@pytest.fixture
def article_v4(image_v4):
    return {"id": 1, "attributes": {
        "title": "Hello Strapi",
        "description": "First post",
        "slug": "hello-strapi",
        "publishedAt": "2024-05-01T10:00:00.000Z",
        "cover": image_v4,
        "author": {"data": {"id": 2, "attributes": {"name": "Ada"}}},
        "category": {"data": {"id": 3, "attributes": {"name": "Tech", "slug": "tech"}}},
        "tags": {"data": [{"id": 4, "attributes": {"name": "Python", "slug": "python"}}]},
        "blocks": [
            {"__component": "shared.quote", "id": 10, "body": "Readability counts"},
            {"__component": "shared.poll", "id": 11, "question": "?"},
        ],
        "seo": {
            "metaTitle": "Hello Strapi | Blog",
            "metaDescription": "A first post",
            "h1Title": "Hello, Strapi!",
            "canonicalUrl": "https://blog.test/hello-strapi",
            "internalLinks": [{"id": 1, "anchorText": "Next post", "url": "/next"}],
            "externalLinks": [{"id": 2, "anchorText": "Strapi docs", "url": "https://docs.strapi.io", "openInNewTab": True}],
        },
    }}
