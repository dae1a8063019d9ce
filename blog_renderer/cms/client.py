"""
Client Strapi — API REST de contenu (articles, catégories, tags, auteurs, global).
Tous les appels : GET {STRAPI_URL}/api/{endpoint}?{query}, timeout explicite.
"""
import logging
from typing import Any, Dict, Optional, Type

import requests
from pydantic import ValidationError

from ..config import get_settings
from ..core.errors import ArticleNotFound, CMSRequestError, CMSResponseError
from .models import (
    ArticleResponse,
    ArticlesResponse,
    AuthorsResponse,
    CategoriesResponse,
    GlobalResponse,
    TagsResponse,
)

log = logging.getLogger(__name__)

DEFAULT_POPULATE = "cover,author,category,tags,blocks,seo"
LIST_POPULATE    = "cover,author,category,tags"
TEASER_POPULATE  = "cover,author,category"
DEFAULT_SORT     = "publishedAt:desc"


def build_query(params: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """Retire les valeurs None, sérialise les booléens à la mode JS (true/false)."""
    query: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = str(value)
    return query


def _pagination(page: Optional[int], page_size: Optional[int]) -> Dict[str, int]:
    return {
        "pagination[page]":     page or 1,
        "pagination[pageSize]": page_size or 10,
    }


class StrapiClient:
    """
    Client synchrone de l'API Strapi.

    Usage:
        >>> client = StrapiClient()
        >>> article = client.get_article_by_slug("hello-world").data
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.base_url  = (base_url or settings.strapi_url).rstrip("/")
        self.api_url   = f"{self.base_url}/api"
        self.api_token = api_token if api_token is not None else settings.api_token
        self.timeout   = timeout if timeout is not None else settings.timeout

    # ── Transport ───────────────────────────────────────────────────────────

    def _fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> dict:
        url = f"{self.api_url}{endpoint}"
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"

        try:
            resp = requests.get(url, params=build_query(params), headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            log.error("Strapi %s injoignable : %s", url, e)
            raise CMSRequestError(None, str(e), url) from e

        if not resp.ok:
            log.error("Strapi %s → %s %s", url, resp.status_code, resp.reason)
            raise CMSRequestError(resp.status_code, resp.reason, url)
        return resp.json()

    def _get(self, response_cls: Type, endpoint: str, params: Optional[Dict[str, Any]] = None):
        payload = self._fetch(endpoint, params)
        try:
            return response_cls.model_validate(payload)
        except ValidationError as e:
            url = f"{self.api_url}{endpoint}"
            log.error("Strapi %s : réponse invalide (%d erreurs)", url, e.error_count())
            raise CMSResponseError(url, str(e)) from e

    # ── Articles ────────────────────────────────────────────────────────────

    def get_articles(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
        populate: Optional[str] = None,
    ) -> ArticlesResponse:
        """Liste paginée ; `filters` = clés Strapi brutes ("filters[slug][$eq]": …)."""
        params = {
            **_pagination(page, page_size),
            "sort":     sort or DEFAULT_SORT,
            "populate": populate or DEFAULT_POPULATE,
            **(filters or {}),
        }
        return self._get(ArticlesResponse, "/articles", params)

    def get_article_by_slug(self, slug: str) -> ArticleResponse:
        params = {
            "filters[slug][$eq]": slug,
            "populate":           DEFAULT_POPULATE,
        }
        response = self._get(ArticlesResponse, "/articles", params)
        if not response.data:
            raise ArticleNotFound(slug)
        return ArticleResponse(data=response.data[0], meta=response.meta)

    def get_article_by_id(self, article_id: int) -> ArticleResponse:
        return self._get(ArticleResponse, f"/articles/{article_id}", {"populate": DEFAULT_POPULATE})

    def get_articles_by_tag(self, tag_slug: str, page: Optional[int] = None,
                            page_size: Optional[int] = None) -> ArticlesResponse:
        params = {
            "filters[tags][slug][$eq]": tag_slug,
            **_pagination(page, page_size),
            "sort":     DEFAULT_SORT,
            "populate": LIST_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    def get_articles_by_category(self, category_slug: str, page: Optional[int] = None,
                                 page_size: Optional[int] = None) -> ArticlesResponse:
        params = {
            "filters[category][slug][$eq]": category_slug,
            **_pagination(page, page_size),
            "sort":     DEFAULT_SORT,
            "populate": DEFAULT_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    def get_articles_by_author(self, author_id: int, page: Optional[int] = None,
                               page_size: Optional[int] = None) -> ArticlesResponse:
        params = {
            "filters[author][id][$eq]": author_id,
            **_pagination(page, page_size),
            "sort":     DEFAULT_SORT,
            "populate": DEFAULT_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    def search_articles(self, query: str, page: Optional[int] = None,
                        page_size: Optional[int] = None) -> ArticlesResponse:
        """Recherche insensible à la casse sur titre OU description."""
        params = {
            "filters[$or][0][title][$containsi]":       query,
            "filters[$or][1][description][$containsi]": query,
            **_pagination(page, page_size),
            "sort":     DEFAULT_SORT,
            "populate": DEFAULT_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    def get_featured_articles(self, limit: int = 3) -> ArticlesResponse:
        params = {
            "filters[featured][$eq]": True,
            "pagination[pageSize]":   limit,
            "sort":     DEFAULT_SORT,
            "populate": TEASER_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    def get_related_articles(self, article_id: int, category_id: int, limit: int = 3) -> ArticlesResponse:
        """Articles de la même catégorie, hors article courant."""
        params = {
            "filters[id][$ne]":           article_id,
            "filters[category][id][$eq]": category_id,
            "pagination[pageSize]":       limit,
            "sort":     DEFAULT_SORT,
            "populate": TEASER_POPULATE,
        }
        return self._get(ArticlesResponse, "/articles", params)

    # ── Taxonomies / global ─────────────────────────────────────────────────

    def get_categories(self) -> CategoriesResponse:
        return self._get(CategoriesResponse, "/categories", {"sort": "name:asc"})

    def get_tags(self) -> TagsResponse:
        return self._get(TagsResponse, "/tags", {"sort": "name:asc"})

    def get_authors(self) -> AuthorsResponse:
        return self._get(AuthorsResponse, "/authors", {"populate": "avatar", "sort": "name:asc"})

    def get_global(self) -> GlobalResponse:
        return self._get(GlobalResponse, "/global", {"populate": "defaultSeo,favicon"})
