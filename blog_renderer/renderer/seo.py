"""
SEO — balises <head> d'un article (meta, Open Graph, Twitter, JSON-LD).

Ordre de repli (une chaîne vide compte comme absente) :
  title          : metaTitle → fallback_title → "Blog Post"
  description    : metaDescription → fallback_description → ""
  og/twitter tit.: openGraphTitle → title
  og/twitter desc: openGraphDescription → description
  robots         : metaRobots → "index, follow"
  viewport       : metaViewport → "width=device-width, initial-scale=1"
"""
import json
import logging
from html import escape
from typing import Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel

from ..cms.models import Seo
from ..core.errors import MalformedAsset
from ..core.images import absolute_url, resolve_image_url

log = logging.getLogger(__name__)

DEFAULT_TITLE    = "Blog Post"
DEFAULT_ROBOTS   = "index, follow"
DEFAULT_VIEWPORT = "width=device-width, initial-scale=1"

META_TITLE_MAX       = 60
META_DESCRIPTION_MAX = 155


def first_present(*candidates: Optional[str], default: str = "") -> str:
    """Premier candidat non vide, dans l'ordre donné."""
    for value in candidates:
        if value:
            return value
    return default


class SeoFields(BaseModel):
    title: str
    description: str
    og_title: str
    og_description: str
    keywords: Optional[str] = None
    canonical_url: Optional[str] = None
    robots: str = DEFAULT_ROBOTS
    viewport: str = DEFAULT_VIEWPORT
    image_url: Optional[str] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    image_alt: Optional[str] = None


class SeoValidation(BaseModel):
    is_valid: bool
    errors: List[str] = []


def resolve_seo_fields(
    seo: Optional[Seo],
    fallback_title: Optional[str] = None,
    fallback_description: Optional[str] = None,
    base_url: Optional[str] = None,
) -> SeoFields:
    seo = seo or Seo()
    title       = first_present(seo.meta_title, fallback_title, default=DEFAULT_TITLE)
    description = first_present(seo.meta_description, fallback_description)

    fields = SeoFields(
        title=title,
        description=description,
        og_title=first_present(seo.open_graph_title, title),
        og_description=first_present(seo.open_graph_description, description),
        keywords=first_present(seo.primary_keywords, seo.keywords) or None,
        canonical_url=seo.canonical_url or None,
        robots=first_present(seo.meta_robots, default=DEFAULT_ROBOTS),
        viewport=first_present(seo.meta_viewport, default=DEFAULT_VIEWPORT),
    )

    image = seo.image
    url = None
    if image is not None:
        try:
            url = absolute_url(image.url, base_url) if image.url else resolve_image_url(image, "large", base_url)
        except MalformedAsset as e:
            log.warning("Image de partage ignorée : %s", e)
    if url:
        fields = fields.model_copy(update={
            "image_url":    url,
            "image_width":  image.width,
            "image_height": image.height,
            "image_alt":    first_present(image.alternative_text, title),
        })
    return fields


def render_seo_head(
    seo: Optional[Seo],
    fallback_title: Optional[str] = None,
    fallback_description: Optional[str] = None,
    base_url: Optional[str] = None,
) -> str:
    """Balises <head> (sans la balise <head> elle-même)."""
    f = resolve_seo_fields(seo, fallback_title, fallback_description, base_url)
    e = escape

    tags = [
        f"<title>{e(f.title)}</title>",
        f'<meta name="description" content="{e(f.description)}">',
    ]
    if f.keywords:
        tags.append(f'<meta name="keywords" content="{e(f.keywords)}">')
    if f.canonical_url:
        tags.append(f'<link rel="canonical" href="{e(f.canonical_url)}">')

    # Open Graph
    tags += [
        '<meta property="og:type" content="article">',
        f'<meta property="og:title" content="{e(f.og_title)}">',
        f'<meta property="og:description" content="{e(f.og_description)}">',
    ]
    if f.canonical_url:
        tags.append(f'<meta property="og:url" content="{e(f.canonical_url)}">')
    if f.image_url:
        tags.append(f'<meta property="og:image" content="{e(f.image_url)}">')
        if f.image_width:
            tags.append(f'<meta property="og:image:width" content="{f.image_width}">')
        if f.image_height:
            tags.append(f'<meta property="og:image:height" content="{f.image_height}">')
        tags.append(f'<meta property="og:image:alt" content="{e(f.image_alt or f.title)}">')

    # Twitter
    tags += [
        '<meta name="twitter:card" content="summary_large_image">',
        f'<meta name="twitter:title" content="{e(f.og_title)}">',
        f'<meta name="twitter:description" content="{e(f.og_description)}">',
    ]
    if f.image_url:
        tags.append(f'<meta name="twitter:image" content="{e(f.image_url)}">')

    tags += [
        f'<meta name="robots" content="{e(f.robots)}">',
        f'<meta name="viewport" content="{e(f.viewport)}">',
    ]

    if seo is not None and seo.structured_data:
        data = seo.structured_data
        payload = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        payload = payload.replace("</", "<\\/")  # pas de </script> prématuré
        tags.append(f'<script type="application/ld+json">{payload}</script>')

    return "\n".join(tags)


def _split_keywords(raw: Optional[str]) -> List[str]:
    return [k.strip() for k in (raw or "").split(",") if k.strip()]


def extract_keywords(seo: Seo) -> Dict[str, List[str]]:
    primary   = _split_keywords(seo.primary_keywords)
    secondary = _split_keywords(seo.secondary_keywords)
    return {"primary": primary, "secondary": secondary, "all": primary + secondary}


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_seo(seo: Seo) -> SeoValidation:
    errors = []
    if seo.meta_title and len(seo.meta_title) > META_TITLE_MAX:
        errors.append(f"Meta title should be {META_TITLE_MAX} characters or less")
    if seo.meta_description and len(seo.meta_description) > META_DESCRIPTION_MAX:
        errors.append(f"Meta description should be {META_DESCRIPTION_MAX} characters or less")
    if seo.canonical_url and not _is_valid_url(seo.canonical_url):
        errors.append("Canonical URL is not valid")
    return SeoValidation(is_valid=not errors, errors=errors)
