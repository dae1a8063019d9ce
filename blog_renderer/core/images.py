"""
Images Strapi — modèle ImageReference + politique de résolution de format.

resolve_image_url(image, "large") :
  1. formats["large"].url si présent
  2. sinon URL canonique
  3. sinon MalformedAsset
Les URLs relatives ("/uploads/…") sont préfixées par l'URL du CMS.
"""
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..config import get_settings
from .envelope import flatten_entity
from .errors import InvalidEnumValue, MalformedAsset

IMAGE_FORMATS = ("thumbnail", "small", "medium", "large")


class ImageFormat(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class ImageReference(BaseModel):
    """Asset stocké : URL canonique + déclinaisons optionnelles (formats)."""
    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True,
    )

    id: Union[int, str, None] = None
    name: str = ""
    url: Optional[str] = None
    alternative_text: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    formats: Dict[str, ImageFormat] = {}

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data):
        data = flatten_entity(data)
        if isinstance(data, dict) and data.get("formats") is None:
            data = {**data, "formats": {}}
        return data

    @model_validator(mode="after")
    def _check_source(self):
        if not self.url and not self.formats:
            raise PydanticCustomError(
                "malformed_asset",
                "Image '{name}' has neither a canonical url nor any format",
                {"name": self.name},
            )
        return self

    @property
    def alt(self) -> str:
        """Texte alternatif : alternativeText, sinon nom du fichier."""
        return self.alternative_text or self.name


def absolute_url(url: str, base_url: Optional[str] = None) -> str:
    if url.startswith("/") and not url.startswith("//"):
        base = base_url if base_url is not None else get_settings().strapi_url
        return f"{base.rstrip('/')}{url}"
    return url


def resolve_image_url(
    image: ImageReference,
    format: str = "medium",
    base_url: Optional[str] = None,
) -> str:
    """URL d'une déclinaison d'image, repli sur l'URL canonique."""
    if format not in IMAGE_FORMATS:
        raise InvalidEnumValue(
            f"Unknown image format {format!r}",
            field="format", value=format, allowed=IMAGE_FORMATS,
        )

    rendition = image.formats.get(format)
    if rendition is not None:
        return absolute_url(rendition.url, base_url)
    if image.url:
        return absolute_url(image.url, base_url)

    raise MalformedAsset(
        f"Image {image.name!r} has no {format!r} format and no canonical url",
        field="url",
    )
