"""
Bloc de base — chaque bloc porte un id stable et un seul tag `__component`.
Les champs suivent le JSON Strapi (camelCase) via alias, attributs en snake_case.
"""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseBlock(BaseModel):
    """Bloc de base (classe parente des 8 variantes)."""
    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True,
    )

    component: str = Field(alias="__component")
    id: Union[int, str]


class UnknownBlock(BaseBlock):
    """Bloc dont le tag n'est pas (encore) supporté — rendu en placeholder."""
    id: Union[int, str, None] = None
