"""Bloc Table — en-têtes + lignes (lignes de longueur libre)."""
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from ..core.envelope import null_to_default
from .base import BaseBlock


def _cell(value):
    # Champ JSON côté Strapi : null et booléens ne s'affichent pas, nombres en texte
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return value


class TableBlock(BaseBlock):
    component: Literal["shared.table"] = Field("shared.table", alias="__component")
    headers: List[str]
    rows: List[List[str]]
    title: Optional[str] = None
    striped: bool = True
    bordered: bool = False

    @field_validator("headers", mode="before")
    @classmethod
    def _stringify_headers(cls, v):
        if isinstance(v, list):
            return [_cell(c) for c in v]
        return v

    @field_validator("rows", mode="before")
    @classmethod
    def _stringify_rows(cls, v):
        if isinstance(v, list):
            return [[_cell(c) for c in row] if isinstance(row, list) else row for row in v]
        return v

    _nulls = field_validator("striped", "bordered", mode="before")(null_to_default)
