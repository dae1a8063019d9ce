"""CMS — client REST Strapi + modèles de réponse."""
from .client import StrapiClient, build_query
from .models import (
    Article,
    Author,
    Category,
    Tag,
    Link,
    Seo,
    Global,
    Pagination,
    StrapiResponse,
    ArticlesResponse,
    ArticleResponse,
    GlobalResponse,
    CategoriesResponse,
    AuthorsResponse,
    TagsResponse,
)

__all__ = [
    "StrapiClient", "build_query",
    "Article", "Author", "Category", "Tag", "Link", "Seo", "Global", "Pagination",
    "StrapiResponse", "ArticlesResponse", "ArticleResponse", "GlobalResponse",
    "CategoriesResponse", "AuthorsResponse", "TagsResponse",
]
