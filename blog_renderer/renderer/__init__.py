"""Renderers — blocs HTML, SEO, tags, page article."""
from .base import RenderedBlock, Renderer
from .html import HTMLRenderer, render, render_block, render_blocks_html
from .seo import (
    SeoFields,
    SeoValidation,
    extract_keywords,
    first_present,
    render_seo_head,
    resolve_seo_fields,
    validate_seo,
)
from .tags import render_tag_badges, render_tag_filter, render_tag_list, toggle_tag
from .page import render_article_page

__all__ = [
    "RenderedBlock", "Renderer",
    "HTMLRenderer", "render", "render_block", "render_blocks_html",
    "SeoFields", "SeoValidation", "extract_keywords", "first_present",
    "render_seo_head", "resolve_seo_fields", "validate_seo",
    "render_tag_badges", "render_tag_filter", "render_tag_list", "toggle_tag",
    "render_article_page",
]
