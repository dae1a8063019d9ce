"""Bloc Call to action — lien-bouton stylé."""
from typing import Literal, Optional

from pydantic import Field, field_validator

from ..core.envelope import null_to_default
from .base import BaseBlock

CTAStyle = Literal["primary", "secondary", "outline", "ghost"]


class CallToActionBlock(BaseBlock):
    component: Literal["shared.call-to-action"] = Field("shared.call-to-action", alias="__component")
    title: str
    url: str
    style: CTAStyle = "primary"
    icon: Optional[str] = None
    open_in_new_tab: bool = False

    _nulls = field_validator("open_in_new_tab", mode="before")(null_to_default)
