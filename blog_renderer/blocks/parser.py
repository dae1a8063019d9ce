"""
Parser de blocs — dict Strapi brut → bloc typé.

Le tag `__component` sélectionne la classe dans le registry ; un tag inconnu
donne un UnknownBlock (non fatal). Les ValidationError Pydantic sont
traduites dans la taxonomie core.errors avec le contexte (id, tag, champ).
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type

from pydantic import ValidationError

from ..core.errors import (
    BlockError,
    BlockErrorInfo,
    InvalidBlock,
    InvalidEnumValue,
    MalformedAsset,
    MissingRequiredField,
    UnknownBlockType,
)
from .base import BaseBlock, UnknownBlock
from .rich_text import RichTextBlock
from .media import MediaBlock
from .quote import QuoteBlock
from .slider import SliderBlock
from .code import CodeBlock
from .cta import CallToActionBlock
from .embed import EmbedBlock
from .table import TableBlock

log = logging.getLogger(__name__)

# ── Registry des blocs ──────────────────────────────────────────────────────
BLOCK_REGISTRY: Dict[str, Type[BaseBlock]] = {
    "shared.rich-text":      RichTextBlock,
    "shared.media":          MediaBlock,
    "shared.quote":          QuoteBlock,
    "shared.slider":         SliderBlock,
    "shared.code-block":     CodeBlock,
    "shared.call-to-action": CallToActionBlock,
    "shared.embed":          EmbedBlock,
    "shared.table":          TableBlock,
}


def _block_context(raw: Mapping) -> Tuple[Any, Optional[str]]:
    block_id = raw.get("id")
    if not isinstance(block_id, (int, str)):
        block_id = None
    tag = raw.get("__component")
    return block_id, (str(tag) if tag not in (None, "") else None)


def translate_validation_error(exc: ValidationError, **ctx) -> BlockError:
    """Première erreur Pydantic → BlockError typée."""
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err["loc"]) or None
    etype = err["type"]
    value = err.get("input")

    if etype == "malformed_asset":
        return MalformedAsset(err["msg"], field=field, **ctx)
    # null imbriqué (ligne de table…) : erreur de type, pas un champ manquant
    top_level = len(err["loc"]) == 1
    if etype == "missing" or (top_level and value is None and etype.endswith("_type")):
        return MissingRequiredField(f"Missing required field {field!r}", field=field, **ctx)
    if etype in ("literal_error", "enum"):
        expected = (err.get("ctx") or {}).get("expected")
        return InvalidEnumValue(
            f"Invalid value {value!r} for {field!r}, expected {expected}",
            field=field, value=value, allowed=expected, **ctx,
        )
    return InvalidBlock(f"{field}: {err['msg']}" if field else err["msg"], field=field, **ctx)


def parse_block(raw: Mapping) -> BaseBlock:
    """Instancie un bloc depuis son dict Strapi. Lève BlockError si invalide."""
    block_id, tag = _block_context(raw)
    if tag is None:
        raise MissingRequiredField(
            "Block has no '__component' tag", block_id=block_id, field="__component",
        )

    block_cls = BLOCK_REGISTRY.get(tag)
    if block_cls is None:
        log.warning("Type de bloc inconnu : %s (id=%s)", tag, block_id)
        return UnknownBlock(component=tag, id=block_id)

    try:
        return block_cls.model_validate(dict(raw))
    except ValidationError as exc:
        raise translate_validation_error(exc, block_id=block_id, component=tag) from exc


def validate_blocks(raws: Iterable[Mapping]) -> Tuple[List[BlockErrorInfo], List[BlockErrorInfo]]:
    """
    Valide une séquence sans la rendre.
    Retourne (erreurs fatales, avertissements) — les tags inconnus sont des avertissements.
    """
    errors: List[BlockErrorInfo] = []
    warnings: List[BlockErrorInfo] = []
    for raw in raws:
        try:
            block = parse_block(raw)
        except BlockError as exc:
            errors.append(exc.to_info())
            continue
        if isinstance(block, UnknownBlock):
            warnings.append(UnknownBlockType(
                f"Unknown block type: {block.component}",
                block_id=block.id, component=block.component, field="__component",
            ).to_info())
    return errors, warnings
