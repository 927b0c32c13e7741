"""
Datamodel node definitions.

These nodes represent the normalized datamodel built from an SDL
document. Type references start as bare names and are swapped for
handles into the model's type list during relation resolution.
Cross references are always handles (indices), never object links,
so self and mutual relations need no special care.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ScalarRef:
    """An unresolved type reference: a bare type name.

    After relation resolution, a field still holding a ScalarRef
    is a scalar field.
    """

    name: str = ""


@dataclass(frozen=True)
class TypeRef:
    """A resolved type reference: a handle into Model.types."""

    index: int = 0
    name: str = ""  # Target type name, kept for readability


@dataclass(frozen=True)
class FieldRef:
    """A handle to a field: type position in Model.types, field position in that type."""

    type_index: int = 0
    field_index: int = 0


TypeReference = ScalarRef | TypeRef


@dataclass
class DirectiveInfo:
    """A non-reserved directive with its literal arguments."""

    name: str = ""
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class FieldDescriptor:
    """A field of an object type, or a value of an enum type."""

    name: str = ""
    type_ref: TypeReference = field(default_factory=ScalarRef)

    is_list: bool = False
    is_required: bool = False
    is_unique: bool = False
    is_id: bool = False
    is_read_only: bool = False
    is_created_at: bool = False
    is_updated_at: bool = False

    default_value: Any = None
    relation_name: str | None = None

    # Paired field on the other side of the relation, set only by the resolver
    related_field: FieldRef | None = None

    database_name: str | None = None
    directives: list[DirectiveInfo] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        """Name of the referenced type, resolved or not."""
        return self.type_ref.name

    @property
    def is_scalar(self) -> bool:
        """Whether the type reference is still a bare name."""
        return isinstance(self.type_ref, ScalarRef)


@dataclass
class TypeDescriptor:
    """An object type or an enum type."""

    name: str = ""
    fields: list[FieldDescriptor] = field(default_factory=list)  # Declaration order
    is_enum: bool = False
    is_embedded: bool = False
    database_name: str | None = None
    directives: list[DirectiveInfo] = field(default_factory=list)

    def get_field(self, name: str) -> FieldDescriptor | None:
        """Get a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class Model:
    """The complete datamodel: type descriptors sorted by name."""

    types: tuple[TypeDescriptor, ...] = ()

    def get_type(self, name: str) -> TypeDescriptor | None:
        """Get the first type with the given name."""
        for type_desc in self.types:
            if type_desc.name == name:
                return type_desc
        return None

    def type_of(self, field_desc: FieldDescriptor) -> TypeDescriptor | None:
        """Return the type a field points to, or None for scalar fields."""
        if isinstance(field_desc.type_ref, TypeRef):
            return self.types[field_desc.type_ref.index]
        return None

    def field_at(self, ref: FieldRef) -> FieldDescriptor:
        """Return the field addressed by a handle."""
        return self.types[ref.type_index].fields[ref.field_index]

    def owner_of(self, ref: FieldRef) -> TypeDescriptor:
        """Return the type containing the field addressed by a handle."""
        return self.types[ref.type_index]

    def related_field_of(self, field_desc: FieldDescriptor) -> FieldDescriptor | None:
        """Return the field paired with the given field, if any."""
        if field_desc.related_field is None:
            return None
        return self.field_at(field_desc.related_field)

    def iter_fields(self) -> Iterator[tuple[TypeDescriptor, FieldDescriptor]]:
        """Iterate over (type, field) pairs in model order."""
        for type_desc in self.types:
            for field_desc in type_desc.fields:
                yield type_desc, field_desc

    def unrelated_fields(self) -> list[tuple[TypeDescriptor, FieldDescriptor]]:
        """Return relation fields (resolved type) that have no paired field."""
        return [(t, f) for t, f in self.iter_fields() if not f.is_scalar and f.related_field is None]

    def to_dict(self) -> dict:
        """Convert the model to plain data."""
        return {"types": [self._type_to_dict(type_desc) for type_desc in self.types]}

    def _type_to_dict(self, type_desc: TypeDescriptor) -> dict:
        return {
            "name": type_desc.name,
            "is_enum": type_desc.is_enum,
            "is_embedded": type_desc.is_embedded,
            "database_name": type_desc.database_name,
            "directives": [_directive_to_dict(d) for d in type_desc.directives],
            "fields": [self._field_to_dict(f) for f in type_desc.fields],
        }

    def _field_to_dict(self, field_desc: FieldDescriptor) -> dict:
        related = self.related_field_of(field_desc)
        related_name = None
        if related is not None:
            related_name = f"{self.owner_of(field_desc.related_field).name}.{related.name}"

        return {
            "name": field_desc.name,
            "type": field_desc.type_name,
            "is_scalar": field_desc.is_scalar,
            "is_list": field_desc.is_list,
            "is_required": field_desc.is_required,
            "is_unique": field_desc.is_unique,
            "is_id": field_desc.is_id,
            "is_read_only": field_desc.is_read_only,
            "is_created_at": field_desc.is_created_at,
            "is_updated_at": field_desc.is_updated_at,
            "default_value": field_desc.default_value,
            "relation_name": field_desc.relation_name,
            "related_field": related_name,
            "database_name": field_desc.database_name,
            "directives": [_directive_to_dict(d) for d in field_desc.directives],
        }


def _directive_to_dict(directive: DirectiveInfo) -> dict:
    return {"name": directive.name, "arguments": dict(directive.arguments)}
