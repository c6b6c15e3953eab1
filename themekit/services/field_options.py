from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import or_
from sqlalchemy.orm import Session

from themekit.models.field_definition import FieldDefinition


class FieldProvider(Protocol):
    def get_field_definition(self, field_id: str) -> dict[str, Any] | None:
        ...


class SqlAlchemyFieldProvider:
    def __init__(self, db: Session):
        self.db = db

    def get_field_definition(self, field_id: str) -> dict[str, Any] | None:
        field_key = str(field_id or "").strip()
        if not field_key:
            return None
        row = (
            self.db.query(FieldDefinition)
            .filter(or_(FieldDefinition.key == field_key, FieldDefinition.name == field_key))
            .order_by(FieldDefinition.key.asc())
            .first()
        )
        if row is None:
            return None
        definition: dict[str, Any] = {
            "key": row.key,
            "name": row.name,
            "label": row.label,
            "type": row.type,
        }
        if isinstance(row.choices, dict):
            definition["choices"] = dict(row.choices)
        return definition


def field_choices(provider: FieldProvider, field_id: str) -> dict[str, Any]:
    definition = provider.get_field_definition(field_id) or {}
    choices = definition.get("choices")
    return dict(choices) if isinstance(choices, dict) else {}
