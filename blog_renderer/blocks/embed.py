"""Bloc Embed — vidéo/iframe externe avec ratio d'affichage."""
from typing import Literal, Optional

from pydantic import Field, field_validator

from ..core.envelope import null_to_default
from .base import BaseBlock

AspectRatio = Literal["16:9", "4:3", "1:1", "21:9"]


class EmbedBlock(BaseBlock):
    component: Literal["shared.embed"] = Field("shared.embed", alias="__component")
    url: str
    aspect_ratio: AspectRatio = "16:9"
    title: Optional[str] = None
    autoplay: bool = False

    _nulls = field_validator("autoplay", mode="before")(null_to_default)
