"""Bloc Quote — citation + attribution optionnelle."""
from typing import Literal, Optional

from pydantic import Field

from .base import BaseBlock


class QuoteBlock(BaseBlock):
    component: Literal["shared.quote"] = Field("shared.quote", alias="__component")
    body: str
    title: Optional[str] = None
