"""Bloc Media — une image avec légende optionnelle."""
from typing import Literal

from pydantic import Field, field_validator

from ..core.envelope import unwrap_relation
from ..core.images import ImageReference
from .base import BaseBlock


class MediaBlock(BaseBlock):
    component: Literal["shared.media"] = Field("shared.media", alias="__component")
    file: ImageReference

    @field_validator("file", mode="before")
    @classmethod
    def _unwrap(cls, v):
        return unwrap_relation(v)
