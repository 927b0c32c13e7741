"""
Relation resolver.

Phase 3 of the pipeline: link type names to type descriptors and pair
up the two sides of every relation. Runs three passes, each completing
before the next starts:

1. Replace bare type names with handles to the matching type.
2. Connect fields sharing an explicit ``@relation(name: ...)``.
3. Infer the remaining pairs when the shape leaves exactly one candidate.

Only an inconsistent named relation is an error. Anything ambiguous is
left unresolved.
"""

from __future__ import annotations

import logging

from ..errors import RelationMismatchError
from .model_nodes import FieldDescriptor, FieldRef, ScalarRef, TypeDescriptor, TypeRef

logger = logging.getLogger(__name__)


class RelationResolver:
    """Resolves type references and relation pairs in place."""

    def __init__(self, types: list[TypeDescriptor]):
        """
        Initialize the resolver.

        Args:
            types: The assembled, sorted type descriptors. Positions in
                this list are the handles stored in TypeRef and FieldRef.
        """
        self.types = types

    def resolve(self) -> None:
        """
        Run all three passes.

        Raises:
            RelationMismatchError: If a named relation points to an inconsistent type
        """
        self.resolve_type_references()
        self.connect_named_relations()
        self.connect_implicit_relations()

    def resolve_type_references(self) -> None:
        """Pass 1: replace bare names that match a declared type with a TypeRef."""
        type_indices: dict[str, int] = {}
        for index, type_desc in enumerate(self.types):
            # First declaration in sorted order wins on duplicate names
            type_indices.setdefault(type_desc.name, index)

        for type_desc in self.types:
            for field_desc in type_desc.fields:
                if not isinstance(field_desc.type_ref, ScalarRef):
                    continue
                index = type_indices.get(field_desc.type_ref.name)
                if index is not None:
                    field_desc.type_ref = TypeRef(index=index, name=field_desc.type_ref.name)

    def connect_named_relations(self) -> None:
        """Pass 2: pair fields carrying the same relation name."""
        for index_a, type_a in enumerate(self.types):
            for field_index_a, field_a in enumerate(type_a.fields):
                if not isinstance(field_a.type_ref, TypeRef):
                    continue
                if field_a.relation_name is None or field_a.related_field is not None:
                    continue

                index_b = field_a.type_ref.index
                for field_index_b, field_b in enumerate(self.types[index_b].fields):
                    if field_b.relation_name != field_a.relation_name:
                        continue
                    if not self._points_to(field_b, index_a):
                        raise RelationMismatchError(field_a.relation_name)
                    self._link(FieldRef(index_a, field_index_a), FieldRef(index_b, field_index_b))
                    break
                else:
                    logger.debug(
                        "No partner for relation %s on %s.%s",
                        field_a.relation_name,
                        type_a.name,
                        field_a.name,
                    )

    def connect_implicit_relations(self) -> None:
        """Pass 3: pair unrelated fields when exactly one candidate exists.

        Fields with a relation name that found no partner in pass 2
        are still eligible here.
        """
        for index_a, type_a in enumerate(self.types):
            for field_index_a, field_a in enumerate(type_a.fields):
                if not isinstance(field_a.type_ref, TypeRef):
                    continue
                if field_a.related_field is not None:
                    continue

                if self._has_sibling_to_same_type(type_a, field_a):
                    logger.debug(
                        "Too many fields from %s to %s, cannot infer a relation for %s without a name",
                        type_a.name,
                        field_a.type_ref.name,
                        field_a.name,
                    )
                    continue

                index_b = field_a.type_ref.index
                candidates = [
                    FieldRef(index_b, field_index_b)
                    for field_index_b, field_b in enumerate(self.types[index_b].fields)
                    if self._points_to(field_b, index_a) and field_b is not field_a
                ]

                if len(candidates) == 1:
                    self._link(FieldRef(index_a, field_index_a), candidates[0])
                elif candidates:
                    logger.debug(
                        "Ambiguous relation for %s.%s: %d candidate fields on %s",
                        type_a.name,
                        field_a.name,
                        len(candidates),
                        field_a.type_ref.name,
                    )

    def _field(self, ref: FieldRef) -> FieldDescriptor:
        return self.types[ref.type_index].fields[ref.field_index]

    def _link(self, ref_a: FieldRef, ref_b: FieldRef) -> None:
        self._field(ref_a).related_field = ref_b
        self._field(ref_b).related_field = ref_a

    @staticmethod
    def _points_to(field_desc: FieldDescriptor, type_index: int) -> bool:
        return isinstance(field_desc.type_ref, TypeRef) and field_desc.type_ref.index == type_index

    @staticmethod
    def _has_sibling_to_same_type(type_desc: TypeDescriptor, field_desc: FieldDescriptor) -> bool:
        return any(other is not field_desc and other.type_ref == field_desc.type_ref for other in type_desc.fields)
