"""Entity schema registry for translatable payloads.

An explicit replacement for annotation scanning: each translatable entity is
registered once at startup with an ordered list of field descriptors. The
tree walker reads descriptors to find protected fields and enum types; the
metadata generator reads them to list form labels.

Usage:
    class User(BaseModel):
        firstName: str = no_translate()
        bio: str | None = None
        role: UserRole

    registry = SchemaRegistry()
    registry.register(EntitySchema.from_model("User", User))
"""

from __future__ import annotations

import types
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, Field

NO_TRANSLATE_MARKER = "no_translate"


def no_translate(default: Any = None, **kwargs: Any) -> Any:
    """pydantic Field whose value is never translated (its label still is)."""
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[NO_TRANSLATE_MARKER] = True
    return Field(default, json_schema_extra=extra, **kwargs)


def _enum_type_name(annotation: Any) -> str | None:
    """Return the Enum class name behind annotation, unwrapping Optional/Union."""
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation.__name__
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        for arg in get_args(annotation):
            if arg is type(None):
                continue
            name = _enum_type_name(arg)
            if name:
                return name
    return None


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field of a translatable entity."""

    name: str
    no_translate: bool = False
    enum_type: str | None = None


@dataclass(frozen=True)
class EntitySchema:
    """Ordered field descriptors of one entity, keyed by wire field name."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    _by_name: Mapping[str, FieldDescriptor] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Entity name must be a non-empty string")
        object.__setattr__(self, "_by_name", {f.name: f for f in self.fields})

    def get(self, field_name: str) -> FieldDescriptor | None:
        """Return the descriptor for field_name, or None if undeclared."""
        return self._by_name.get(field_name)

    def is_protected(self, field_name: str) -> bool:
        """True if the field's value must not be translated."""
        descriptor = self._by_name.get(field_name)
        return descriptor is not None and descriptor.no_translate

    def enum_type(self, field_name: str) -> str | None:
        """Enum type name declared for field_name, if any."""
        descriptor = self._by_name.get(field_name)
        return descriptor.enum_type if descriptor else None

    @classmethod
    def from_model(cls, name: str, model: type[BaseModel]) -> EntitySchema:
        """Build a schema from a pydantic model's declared fields.

        Field names are the serialization names (alias when set), i.e. the
        keys seen in JSON responses.
        """
        descriptors = []
        for attr, info in model.model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            descriptors.append(
                FieldDescriptor(
                    name=info.serialization_alias or info.alias or attr,
                    no_translate=bool(extra.get(NO_TRANSLATE_MARKER, False)),
                    enum_type=_enum_type_name(info.annotation),
                )
            )
        return cls(name=name, fields=tuple(descriptors))


class SchemaRegistry:
    """Entity name -> EntitySchema. Built once at startup; read-only afterwards."""

    def __init__(self, schemas: Iterable[EntitySchema] = ()) -> None:
        self._schemas: dict[str, EntitySchema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: EntitySchema) -> EntitySchema:
        """Add schema; a second registration under the same name replaces the first."""
        self._schemas[schema.name] = schema
        return schema

    def register_model(self, name: str, model: type[BaseModel]) -> EntitySchema:
        """Shortcut for register(EntitySchema.from_model(name, model))."""
        return self.register(EntitySchema.from_model(name, model))

    def get(self, name: str | None) -> EntitySchema | None:
        """Return the schema registered under name, or None."""
        if not name:
            return None
        return self._schemas.get(name)

    def names(self) -> list[str]:
        """Registered entity names, sorted."""
        return sorted(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[EntitySchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)
