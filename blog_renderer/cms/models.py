"""
Modèles Strapi — Article, Author, Category, Tag, Seo, Global + enveloppe réponse.

Accepte la forme v4 ({"id", "attributes": {...}}, relations {"data": ...})
comme la forme v5 (plate). Les blocs d'article restent des dicts bruts :
ils sont validés au rendu, pour que les tags inconnus atteignent le placeholder.
"""
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..core.envelope import flatten_entity, null_to_default, unwrap_many, unwrap_relation
from ..core.images import ImageReference

T = TypeVar("T")


class StrapiModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True,
    )


class StrapiEntity(StrapiModel):
    """Entité de collection (id + attributs aplatis)."""
    id: Union[int, str]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data):
        return flatten_entity(data)


def _optional_media(v):
    v = unwrap_relation(v)
    return v or None


class Category(StrapiEntity):
    name: str
    slug: str


class Tag(StrapiEntity):
    name: str
    slug: str
    description: Optional[str] = None


class Author(StrapiEntity):
    name: str
    email: Optional[str] = None
    avatar: Optional[ImageReference] = None

    @field_validator("avatar", mode="before")
    @classmethod
    def _unwrap_avatar(cls, v):
        return _optional_media(v)


class Link(StrapiModel):
    id: Union[int, str, None] = None
    anchor_text: str
    url: str
    open_in_new_tab: bool = False

    _nulls = field_validator("open_in_new_tab", mode="before")(null_to_default)


class Seo(StrapiModel):
    """Composant SEO. Casse retenue : canonicalUrl (canonicalURL accepté)."""
    id: Union[int, str, None] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_image: Optional[ImageReference] = None
    share_image: Optional[ImageReference] = None
    keywords: Optional[str] = None
    primary_keywords: Optional[str] = None
    secondary_keywords: Optional[str] = None
    meta_robots: Optional[str] = None
    meta_viewport: Optional[str] = None
    structured_data: Optional[Any] = None
    canonical_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("canonicalUrl", "canonicalURL", "canonical_url"),
    )
    open_graph_title: Optional[str] = None
    open_graph_description: Optional[str] = None
    h1_title: Optional[str] = None
    internal_links: List[Link] = Field(default_factory=list)
    external_links: List[Link] = Field(default_factory=list)

    @field_validator("meta_image", "share_image", mode="before")
    @classmethod
    def _unwrap_media(cls, v):
        return _optional_media(v)

    @field_validator("internal_links", "external_links", mode="before")
    @classmethod
    def _none_to_list(cls, v):
        return [] if v is None else v

    @property
    def image(self) -> Optional[ImageReference]:
        """Image de partage : shareImage, sinon metaImage."""
        return self.share_image or self.meta_image


class Article(StrapiEntity):
    title: str
    description: str = ""
    slug: str
    cover: Optional[ImageReference] = None
    author: Optional[Author] = None
    category: Optional[Category] = None
    tags: List[Tag] = Field(default_factory=list)
    blocks: List[Dict[str, Any]] = Field(default_factory=list)
    seo: Optional[Seo] = None
    published_at: Optional[str] = None

    _nulls = field_validator("description", mode="before")(null_to_default)

    @field_validator("cover", "author", "category", mode="before")
    @classmethod
    def _unwrap_one(cls, v):
        return _optional_media(v)

    @field_validator("tags", "blocks", mode="before")
    @classmethod
    def _unwrap_list(cls, v):
        return unwrap_many(v)


class Global(StrapiEntity):
    site_name: str = ""
    default_seo: Optional[Seo] = None
    favicon: Optional[ImageReference] = None

    _nulls = field_validator("site_name", mode="before")(null_to_default)

    @field_validator("favicon", mode="before")
    @classmethod
    def _unwrap_favicon(cls, v):
        return _optional_media(v)


class Pagination(StrapiModel):
    page: int = 1
    page_size: int = 10
    page_count: int = 0
    total: int = 0

    _nulls = field_validator("page", "page_size", "page_count", "total", mode="before")(null_to_default)


class ResponseMeta(StrapiModel):
    pagination: Optional[Pagination] = None


class StrapiResponse(StrapiModel, Generic[T]):
    """Enveloppe standard {"data": ..., "meta": {"pagination": ...}}."""
    data: T
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


ArticlesResponse = StrapiResponse[List[Article]]
ArticleResponse = StrapiResponse[Article]
GlobalResponse = StrapiResponse[Global]
CategoriesResponse = StrapiResponse[List[Category]]
AuthorsResponse = StrapiResponse[List[Author]]
TagsResponse = StrapiResponse[List[Tag]]
