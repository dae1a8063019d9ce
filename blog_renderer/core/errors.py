"""
Taxonomie d'erreurs du rendu de blocs + du client CMS.

Bloc :
  UnknownBlockType      → non fatal (placeholder), jamais levée par render()
  InvalidEnumValue      → valeur hors enum (style, aspectRatio, language, format)
  MissingRequiredField  → champ requis absent (body, url, code, headers…)
  MalformedAsset        → image sans URL canonique ni format exploitable
  InvalidBlock          → toute autre violation de schéma (mauvais type…)

CMS :
  CMSRequestError       → réponse HTTP non-2xx ou erreur réseau
  ArticleNotFound       → aucun article pour un slug
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


BlockId = Union[int, str, None]


class BlockErrorInfo(BaseModel):
    """Forme sérialisable d'une BlockError (réponses JSON, marqueurs d'erreur)."""
    model_config = ConfigDict(frozen=True)

    kind: str
    message: str
    block_id: BlockId = None
    component: Optional[str] = None
    field: Optional[str] = None


class BlockError(Exception):
    """Erreur de validation/rendu d'un bloc, avec son contexte (id, tag, champ)."""
    kind = "block_error"

    def __init__(
        self,
        message: str,
        *,
        block_id: BlockId = None,
        component: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.block_id = block_id
        self.component = component
        self.field = field

    def bind(self, block_id: BlockId, component: Optional[str]) -> "BlockError":
        """Complète le contexte bloc s'il n'est pas déjà renseigné."""
        if self.block_id is None:
            self.block_id = block_id
        if self.component is None:
            self.component = component
        return self

    def to_info(self) -> BlockErrorInfo:
        return BlockErrorInfo(
            kind=self.kind,
            message=self.message,
            block_id=self.block_id,
            component=self.component,
            field=self.field,
        )

    def __str__(self) -> str:
        ctx = []
        if self.component:
            ctx.append(f"component={self.component}")
        if self.block_id is not None:
            ctx.append(f"id={self.block_id}")
        if self.field:
            ctx.append(f"field={self.field}")
        return f"{self.message} ({', '.join(ctx)})" if ctx else self.message


class UnknownBlockType(BlockError):
    kind = "unknown_block_type"


class InvalidEnumValue(BlockError):
    kind = "invalid_enum_value"

    def __init__(self, message: str, *, value: Any = None, allowed: Any = None, **ctx):
        super().__init__(message, **ctx)
        self.value = value
        self.allowed = allowed


class MissingRequiredField(BlockError):
    kind = "missing_required_field"


class MalformedAsset(BlockError):
    kind = "malformed_asset"


class InvalidBlock(BlockError):
    kind = "invalid_block"


# ── CMS ──────────────────────────────────────────────────────────────────────

class CMSError(Exception):
    """Erreur côté API de contenu (Strapi)."""


class CMSRequestError(CMSError):
    def __init__(self, status: Optional[int], reason: str, url: str):
        super().__init__(f"API request failed: {status} {reason} ({url})")
        self.status = status
        self.reason = reason
        self.url = url


class CMSResponseError(CMSError):
    """Réponse Strapi reçue mais non conforme aux modèles (schéma CMS modifié…)."""

    def __init__(self, url: str, detail: str):
        super().__init__(f"Invalid API response ({url}): {detail}")
        self.url = url
        self.detail = detail


class ArticleNotFound(CMSError):
    def __init__(self, slug: str):
        super().__init__(f"Article not found: {slug}")
        self.slug = slug
