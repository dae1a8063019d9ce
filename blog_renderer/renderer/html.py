"""
Renderer HTML — une séquence de blocs → une séquence de fragments HTML.
Dispatch : une stratégie par variante, placeholder pour les tags inconnus.
Classes CSS Tailwind reprises du front React.
"""
import logging
from html import escape
from typing import Any, Dict, Iterable, List, Mapping, Optional, get_args

from ..blocks.base import BaseBlock, UnknownBlock
from ..blocks.rich_text import RichTextBlock
from ..blocks.media import MediaBlock
from ..blocks.quote import QuoteBlock
from ..blocks.slider import SliderBlock
from ..blocks.code import CodeBlock, CodeLanguage
from ..blocks.cta import CallToActionBlock
from ..blocks.embed import EmbedBlock
from ..blocks.table import TableBlock
from ..blocks.parser import parse_block
from ..config import get_settings
from ..core.errors import BlockError, InvalidEnumValue
from ..core.embeds import resolve_embed_url
from ..core.images import resolve_image_url
from .base import RenderedBlock

log = logging.getLogger(__name__)

_CODE_LANGUAGES = {lang: f"language-{lang}" for lang in get_args(CodeLanguage)}

_CTA_BASE = "inline-flex items-center px-6 py-3 rounded-lg font-medium transition-colors"
_CTA_STYLES = {
    "primary":   "bg-blue-600 text-white hover:bg-blue-700",
    "secondary": "bg-gray-600 text-white hover:bg-gray-700",
    "outline":   "border-2 border-blue-600 text-blue-600 hover:bg-blue-600 hover:text-white",
    "ghost":     "text-blue-600 hover:bg-blue-50",
}

_ASPECT_RATIOS = {
    "16:9": "aspect-video",
    "4:3":  "aspect-4/3",
    "1:1":  "aspect-square",
    "21:9": "aspect-21/9",
}

_EMBED_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"


def _choice(mapping: Dict[str, str], value: Any, field: str, b: BaseBlock) -> str:
    """Lookup dans un enum fermé — pas de valeur par défaut au rendu."""
    try:
        return mapping[value]
    except (KeyError, TypeError):
        raise InvalidEnumValue(
            f"Invalid value {value!r} for {field!r}",
            field=field, value=value, allowed=tuple(mapping),
            block_id=b.id, component=b.component,
        ) from None


# ── Point d'entrée public ───────────────────────────────────────────────────

def render(
    blocks: Iterable[Any],
    strict: bool = False,
    base_url: Optional[str] = None,
) -> List[RenderedBlock]:
    """
    Rend chaque bloc indépendamment, dans l'ordre (len(sortie) == len(entrée)).

    Les entrées peuvent être des blocs typés ou des dicts Strapi bruts.
    Un bloc invalide produit un marqueur d'erreur et le rendu continue,
    sauf en mode strict où la première BlockError est propagée.
    """
    return [_render_item(item, strict, base_url) for item in blocks]


def render_blocks_html(
    blocks: Iterable[Any],
    strict: bool = False,
    base_url: Optional[str] = None,
) -> str:
    """Conteneur `content-renderer` avec tous les fragments concaténés."""
    parts = "\n".join(r.html for r in render(blocks, strict=strict, base_url=base_url))
    return f'<div class="content-renderer">\n{parts}\n</div>'


def _render_item(item: Any, strict: bool, base_url: Optional[str]) -> RenderedBlock:
    block = None
    try:
        block = parse_block(item) if isinstance(item, Mapping) else item
        html = render_block(block, base_url=base_url)
    except BlockError as exc:
        if isinstance(block, BaseBlock):
            exc.bind(block.id, block.component)
        if strict:
            raise
        log.error("Bloc rejeté : %s", exc)
        return RenderedBlock(
            block_id=exc.block_id,
            component=exc.component,
            html=render_error_marker(exc),
            error=exc.to_info(),
        )
    if not isinstance(block, BaseBlock):
        return RenderedBlock(html=html)
    return RenderedBlock(block_id=block.id, component=block.component, html=html)


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: Any, base_url: Optional[str] = None) -> str:
    """Dispatch vers la stratégie de la variante ; placeholder sinon."""
    if isinstance(block, RichTextBlock):     return render_rich_text_block(block)
    if isinstance(block, MediaBlock):        return render_media_block(block, base_url)
    if isinstance(block, QuoteBlock):        return render_quote_block(block)
    if isinstance(block, SliderBlock):       return render_slider_block(block, base_url)
    if isinstance(block, CodeBlock):         return render_code_block(block)
    if isinstance(block, CallToActionBlock): return render_cta_block(block)
    if isinstance(block, EmbedBlock):        return render_embed_block(block)
    if isinstance(block, TableBlock):        return render_table_block(block)

    if not isinstance(block, UnknownBlock):
        log.warning("Objet non rendable : %r", type(block).__name__)
    return render_unknown_block(block)


def render_unknown_block(block: Any) -> str:
    tag = getattr(block, "component", None)
    tag = "?" if tag is None else str(tag)
    return (
        f'<div class="unknown-block" data-component="{escape(tag)}">'
        f'Unknown block type: {escape(tag)}</div>'
    )


def render_error_marker(exc: BlockError) -> str:
    block_id = "" if exc.block_id is None else str(exc.block_id)
    return (
        f'<div class="block-error" data-component="{escape(exc.component or "?")}"'
        f' data-block-id="{escape(block_id)}" data-error="{exc.kind}" hidden>'
        f'{escape(str(exc))}</div>'
    )


# ── Stratégies par variante ─────────────────────────────────────────────────

def render_rich_text_block(b: RichTextBlock) -> str:
    # Body déjà assaini côté CMS : injecté tel quel
    return f'<div class="rich-text-block">{b.body}</div>'


def _img(image, base_url: Optional[str], css: str, image_format: str = "medium") -> str:
    src = resolve_image_url(image, image_format, base_url)
    return f'<img src="{escape(src)}" alt="{escape(image.alt)}" class="{css}">'


def render_media_block(
    b: MediaBlock,
    base_url: Optional[str] = None,
    image_format: Optional[str] = None,
) -> str:
    """Format demandé : `image_format`, sinon BLOG_DEFAULT_IMAGE_FORMAT (medium)."""
    image_format = image_format or get_settings().default_image_format
    caption = ""
    if b.file.caption:
        caption = f'\n  <p class="text-sm text-gray-600 mt-2 text-center">{escape(b.file.caption)}</p>'

    return f"""<div class="media-block">
  {_img(b.file, base_url, "w-full rounded-lg", image_format)}{caption}
</div>"""


def render_quote_block(b: QuoteBlock) -> str:
    cite = f'\n  <cite class="text-sm text-gray-600">&mdash; {escape(b.title)}</cite>' if b.title else ""

    return f"""<blockquote class="quote-block border-l-4 border-blue-500 pl-4 my-6">
  <p class="text-lg italic mb-2">&ldquo;{escape(b.body)}&rdquo;</p>{cite}
</blockquote>"""


def render_slider_block(b: SliderBlock, base_url: Optional[str] = None) -> str:
    images = "".join(
        _img(f, base_url, "w-full h-48 object-cover rounded-lg")
        for f in b.files
    )

    return f"""<div class="slider-block">
  <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-4">{images}</div>
</div>"""


def render_code_block(b: CodeBlock) -> str:
    lang_cls = _choice(_CODE_LANGUAGES, b.language, "language", b)

    label = ""
    if b.title:
        label = f'<div class="bg-gray-800 text-white px-4 py-2 rounded-t-lg text-sm font-mono">{escape(b.title)}</div>\n  '
    rounding = "rounded-b-lg" if b.title else "rounded-lg"
    line_numbers = "true" if b.show_line_numbers else "false"

    return f"""<div class="code-block my-6" data-language="{b.language}" data-line-numbers="{line_numbers}">
  {label}<pre class="bg-gray-900 text-gray-100 p-4 {rounding} overflow-x-auto"><code class="{lang_cls}">{escape(b.code)}</code></pre>
</div>"""


def render_cta_block(b: CallToActionBlock) -> str:
    style_cls = _choice(_CTA_STYLES, b.style, "style", b)

    if b.open_in_new_tab:
        target = ' target="_blank" rel="noopener noreferrer"'
    else:
        target = ' target="_self"'
    icon = f'<span class="ml-2">{escape(b.icon)}</span>' if b.icon else ""

    return f"""<div class="cta-block my-6 text-center">
  <a href="{escape(b.url)}"{target} class="{_CTA_BASE} {style_cls}">{escape(b.title)}{icon}</a>
</div>"""


def render_embed_block(b: EmbedBlock) -> str:
    ratio_cls = _choice(_ASPECT_RATIOS, b.aspect_ratio, "aspectRatio", b)
    src = resolve_embed_url(b.url, b.autoplay)

    header = f'<h3 class="text-lg font-semibold mb-2">{escape(b.title)}</h3>\n  ' if b.title else ""
    title_attr = f' title="{escape(b.title)}"' if b.title else ""

    return f"""<div class="embed-block my-6">
  {header}<div class="{ratio_cls} w-full">
    <iframe src="{escape(src)}" class="w-full h-full rounded-lg" frameborder="0" allowfullscreen allow="{_EMBED_ALLOW}"{title_attr}></iframe>
  </div>
</div>"""


def render_table_block(b: TableBlock) -> str:
    border = " border border-gray-300" if b.bordered else ""

    header = f'<h3 class="text-lg font-semibold mb-2">{escape(b.title)}</h3>\n  ' if b.title else ""
    head_cells = "".join(
        f'<th class="px-4 py-2 text-left font-semibold{border} bg-gray-100">{escape(h)}</th>'
        for h in b.headers
    )

    # Lignes rendues telles quelles : ni padding ni troncature
    rows_html = ""
    for i, row in enumerate(b.rows):
        row_cls = ' class="bg-gray-50"' if b.striped and i % 2 == 1 else ""
        cells = "".join(f'<td class="px-4 py-2{border}">{escape(c)}</td>' for c in row)
        rows_html += f"<tr{row_cls}>{cells}</tr>"

    return f"""<div class="table-block my-6 overflow-x-auto">
  {header}<table class="w-full border-collapse{border}">
    <thead><tr>{head_cells}</tr></thead>
    <tbody>{rows_html}</tbody>
  </table>
</div>"""


class HTMLRenderer:
    """Renderer HTML configuré (URL de base des médias)."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url

    def render_block(self, block: BaseBlock) -> str:
        return render_block(block, base_url=self.base_url)

    def render(self, blocks: Iterable[Any], strict: bool = False) -> List[RenderedBlock]:
        return render(blocks, strict=strict, base_url=self.base_url)
