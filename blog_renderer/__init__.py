"""
Blog renderer — rendu HTML des contenus d'un blog Strapi.

Usage (blocs bruts):
    >>> from blog_renderer import render
    >>> out = render([{"__component": "shared.quote", "id": 1, "body": "Hello"}])
    >>> out[0].html

Usage (article complet):
    >>> from blog_renderer import StrapiClient, render_article_page
    >>> client = StrapiClient()
    >>> html = render_article_page(client.get_article_by_slug("hello-world").data)
"""

__version__ = "0.1.0"

# ── Blocs ───────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, UnknownBlock,
    RichTextBlock, MediaBlock, QuoteBlock, SliderBlock,
    CodeBlock, CallToActionBlock, EmbedBlock, TableBlock,
    BlockUnion, BLOCK_REGISTRY, parse_block, validate_blocks,
)

# ── Core ────────────────────────────────────────────────────────────────────
from .core import (
    BlockError, BlockErrorInfo,
    UnknownBlockType, InvalidEnumValue, MissingRequiredField, MalformedAsset, InvalidBlock,
    CMSError, CMSRequestError, CMSResponseError, ArticleNotFound,
    ImageFormat, ImageReference, resolve_image_url, resolve_embed_url,
)

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import (
    RenderedBlock, HTMLRenderer, render, render_block, render_blocks_html,
    render_seo_head, extract_keywords, validate_seo,
    render_tag_badges, render_tag_list, render_tag_filter, toggle_tag,
    render_article_page,
)

# ── CMS ─────────────────────────────────────────────────────────────────────
from .cms import StrapiClient, Article, Author, Category, Tag, Seo, Global

__all__ = [
    # blocs
    "BaseBlock", "UnknownBlock",
    "RichTextBlock", "MediaBlock", "QuoteBlock", "SliderBlock",
    "CodeBlock", "CallToActionBlock", "EmbedBlock", "TableBlock",
    "BlockUnion", "BLOCK_REGISTRY", "parse_block", "validate_blocks",
    # core
    "BlockError", "BlockErrorInfo",
    "UnknownBlockType", "InvalidEnumValue", "MissingRequiredField", "MalformedAsset", "InvalidBlock",
    "CMSError", "CMSRequestError", "CMSResponseError", "ArticleNotFound",
    "ImageFormat", "ImageReference", "resolve_image_url", "resolve_embed_url",
    # rendu
    "RenderedBlock", "HTMLRenderer", "render", "render_block", "render_blocks_html",
    "render_seo_head", "extract_keywords", "validate_seo",
    "render_tag_badges", "render_tag_list", "render_tag_filter", "toggle_tag",
    "render_article_page",
    # cms
    "StrapiClient", "Article", "Author", "Category", "Tag", "Seo", "Global",
]
