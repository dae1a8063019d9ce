"""Bloc Slider — galerie d'images ordonnée (éventuellement vide)."""
from typing import List, Literal

from pydantic import Field, field_validator

from ..core.envelope import unwrap_many
from ..core.images import ImageReference
from .base import BaseBlock


class SliderBlock(BaseBlock):
    component: Literal["shared.slider"] = Field("shared.slider", alias="__component")
    files: List[ImageReference] = Field(default_factory=list)

    @field_validator("files", mode="before")
    @classmethod
    def _unwrap(cls, v):
        return unwrap_many(v)
