"""Bloc Rich text — markup déjà formaté (assaini en amont)."""
from typing import Literal

from pydantic import Field

from .base import BaseBlock


class RichTextBlock(BaseBlock):
    component: Literal["shared.rich-text"] = Field("shared.rich-text", alias="__component")
    body: str
