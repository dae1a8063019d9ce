"""Bloc Code — snippet + langage (coloration faite côté client)."""
from typing import Literal, Optional

from pydantic import Field, field_validator

from ..core.envelope import null_to_default
from .base import BaseBlock

CodeLanguage = Literal[
    "javascript", "typescript", "jsx", "tsx", "html", "css", "scss", "json",
    "bash", "python", "php", "sql", "markdown", "yaml", "xml",
]


class CodeBlock(BaseBlock):
    component: Literal["shared.code-block"] = Field("shared.code-block", alias="__component")
    code: str
    language: CodeLanguage
    title: Optional[str] = None
    show_line_numbers: bool = True

    _nulls = field_validator("show_line_numbers", mode="before")(null_to_default)
