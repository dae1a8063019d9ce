"""
Page article — document HTML complet : SEO + en-tête + blocs + tags + liens.
"""
import logging
from html import escape
from typing import List, Optional

from ..cms.models import Article, Global, Link
from ..core.errors import MalformedAsset
from ..core.images import resolve_image_url
from .html import render_blocks_html
from .seo import first_present, render_seo_head
from .tags import render_tag_badges

log = logging.getLogger(__name__)


def _render_links(links: List[Link], title: str, css: str) -> str:
    if not links:
        return ""
    items = ""
    for lnk in links:
        if lnk.open_in_new_tab:
            target = ' target="_blank" rel="noopener noreferrer"'
        else:
            target = ' target="_self"'
        items += f'<li><a href="{escape(lnk.url)}" class="{css}"{target}>{escape(lnk.anchor_text)}</a></li>'
    return f'<div class="{css}s">\n  <h3>{escape(title)}</h3>\n  <ul>{items}</ul>\n</div>'


def _render_byline(article: Article) -> str:
    parts = []
    if article.author:
        parts.append(f'<span class="article__author">{escape(article.author.name)}</span>')
    if article.category:
        parts.append(
            f'<a href="/category/{escape(article.category.slug)}" class="article__category">'
            f'{escape(article.category.name)}</a>'
        )
    if article.published_at:
        parts.append(f'<time datetime="{escape(article.published_at)}">{escape(article.published_at[:10])}</time>')
    return f'<div class="article__byline">{" · ".join(parts)}</div>' if parts else ""


def render_article_page(
    article: Article,
    global_settings: Optional[Global] = None,
    strict: bool = False,
    base_url: Optional[str] = None,
    lang: str = "en",
) -> str:
    """HTML complet d'un article (SEO article, sinon SEO par défaut du site)."""
    seo = article.seo or (global_settings.default_seo if global_settings else None)
    head = render_seo_head(seo, article.title, article.description, base_url)

    h1 = first_present(article.seo.h1_title if article.seo else None, article.title)

    cover = ""
    if article.cover:
        try:
            src = resolve_image_url(article.cover, "large", base_url)
        except MalformedAsset as e:
            log.warning("Couverture ignorée (%s) : %s", article.slug, e)
        else:
            cover = f'<img src="{escape(src)}" alt="{escape(article.cover.alt)}" class="article__cover">'

    internal = external = ""
    if article.seo:
        internal = _render_links(article.seo.internal_links, "Related Articles", "internal-link")
        external = _render_links(article.seo.external_links, "External Resources", "external-link")

    site_name = global_settings.site_name if global_settings else ""
    header = f'<header class="site-header">{escape(site_name)}</header>' if site_name else ""

    return f"""<!DOCTYPE html>
<html lang="{escape(lang)}">
<head>
  <meta charset="UTF-8">
  {head}
</head>
<body>
{header}
<article class="article">
  <h1 class="article__title">{escape(h1)}</h1>
  {_render_byline(article)}
  {cover}
  {render_tag_badges(article.tags)}
{render_blocks_html(article.blocks, strict=strict, base_url=base_url)}
  {internal}
  {external}
</article>
</body>
</html>"""
