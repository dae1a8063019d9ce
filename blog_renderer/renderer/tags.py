"""Tags — badges, liste et filtre de tags."""
from html import escape
from typing import Iterable, List, Optional, Sequence

from ..cms.models import Tag

_PILL = "px-3 py-1 text-sm rounded-full transition-colors duration-200"


def _button(tag: Tag, label: str, css: str, extra: str = "") -> str:
    return (
        f'<button type="button" class="{_PILL} {css}" data-tag-id="{escape(str(tag.id))}"'
        f' data-tag-slug="{escape(tag.slug)}"{extra}>{escape(label)}</button>'
    )


def render_tag_badges(tags: Optional[Sequence[Tag]], css_class: str = "") -> str:
    """Badges `#nom` d'un article ; aucun tag → chaîne vide."""
    if not tags:
        return ""
    buttons = "".join(
        _button(t, f"#{t.name}", "bg-blue-100 text-blue-800 hover:bg-blue-200")
        for t in tags
    )
    return f'<div class="{_classes("tag-badges flex flex-wrap gap-2", css_class)}">{buttons}</div>'


def render_tag_list(tags: Optional[Sequence[Tag]], css_class: str = "") -> str:
    if not tags:
        return ""
    buttons = "".join(
        _button(t, t.name, "bg-gray-100 text-gray-800 hover:bg-gray-200")
        for t in tags
    )
    return f'<div class="{_classes("tag-list flex flex-wrap gap-2", css_class)}">{buttons}</div>'


def render_tag_filter(all_tags: Sequence[Tag], selected: Iterable[str], css_class: str = "") -> str:
    """Filtre : tags sélectionnés (par slug) mis en avant + aria-pressed."""
    selected = set(selected)
    buttons = ""
    for t in all_tags:
        is_on = t.slug in selected
        css = "bg-blue-500 text-white" if is_on else "bg-gray-100 text-gray-800 hover:bg-gray-200"
        buttons += _button(t, t.name, css, f' aria-pressed="{"true" if is_on else "false"}"')

    return f"""<div class="{_classes("tag-filter space-y-2", css_class)}">
  <h3 class="text-lg font-semibold">Filter by Tags</h3>
  <div class="flex flex-wrap gap-2">{buttons}</div>
</div>"""


def toggle_tag(selected: Sequence[str], slug: str) -> List[str]:
    """Nouvelle sélection avec `slug` ajouté ou retiré (ordre conservé)."""
    if slug in selected:
        return [s for s in selected if s != slug]
    return [*selected, slug]


def _classes(base: str, extra: str) -> str:
    return f"{base} {extra}" if extra else base
