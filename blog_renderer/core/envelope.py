"""
Enveloppes Strapi — normalise les formes v4 et v5 vers un dict plat.

v4 : {"data": {"id": 1, "attributes": {...}}}   (relations + médias)
v5 : {"id": 1, "documentId": "...", ...}          (déjà plat)
"""
from typing import Any

from pydantic import ValidationInfo


def unwrap_relation(value: Any) -> Any:
    """{"data": X} → X (relation/média v4). Les autres valeurs passent telles quelles."""
    if isinstance(value, dict) and "data" in value and set(value) <= {"data", "meta"}:
        return value["data"]
    return value


def flatten_entity(value: Any) -> Any:
    """{"id": 1, "attributes": {...}} → {"id": 1, ...attributes}."""
    value = unwrap_relation(value)
    if isinstance(value, dict) and isinstance(value.get("attributes"), dict):
        flat = {k: v for k, v in value.items() if k != "attributes"}
        flat.update(value["attributes"])
        return flat
    return value


def unwrap_many(value: Any) -> Any:
    """Relation multiple : {"data": [...]} → [...], None → []."""
    value = unwrap_relation(value)
    return [] if value is None else value


def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
    """
    Validator `mode="before"` : Strapi renvoie null pour un attribut non
    renseigné, on retombe alors sur la valeur par défaut du champ.

        _nulls = field_validator("autoplay", mode="before")(null_to_default)
    """
    if value is None:
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)
    return value
