"""
Model builder that turns SDL definitions into type descriptors.

Phase 2 of the pipeline: walk the document, build one descriptor per
object or enum type, and sort them. Type references are left as bare
names; the relation resolver links them afterwards.
"""

from __future__ import annotations

from graphql.language import (
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    Node,
    ObjectTypeDefinitionNode,
)

from ..policy import ClassificationPolicy, directive_policy
from ..schema_ast.directives import (
    RESERVED_DIRECTIVES,
    DirectiveKeys,
    directive_argument,
    directive_arguments,
    extra_directives,
    find_directive,
    has_directive,
)
from ..schema_ast.modifiers import TypeModifier, resolve_type
from ..schema_ast.parser import SchemaParser
from .model_nodes import DirectiveInfo, FieldDescriptor, ScalarRef, TypeDescriptor

# Type given to the synthetic fields of enum descriptors
ENUM_VALUE_TYPE = "String"


class ModelBuilder:
    """Builds unresolved type descriptors from an SDL document."""

    def __init__(self, policy: ClassificationPolicy | None = None, reserved_directives: frozenset[str] = RESERVED_DIRECTIVES):
        """
        Initialize the builder.

        Args:
            policy: Identity, timestamp and embedded classification
            reserved_directives: Directive names hidden from the extra directive lists
        """
        self.policy = policy or directive_policy()
        self.reserved_directives = reserved_directives

    def build(self, document: DocumentNode) -> list[TypeDescriptor]:
        """
        Build all type descriptors of a document.

        Object types come first, enums are appended, then the list is
        sorted by name. The sort is stable, so types sharing a name keep
        their collection order.

        Args:
            document: The parsed SDL document

        Returns:
            Sorted list of unresolved TypeDescriptors
        """
        types = [
            *self.build_object_types(document),
            *self.build_enum_types(document),
        ]
        types.sort(key=lambda type_desc: type_desc.name)
        return types

    def build_object_types(self, document: DocumentNode) -> list[TypeDescriptor]:
        return [self.build_object_type(definition) for definition in SchemaParser.object_type_definitions(document)]

    def build_enum_types(self, document: DocumentNode) -> list[TypeDescriptor]:
        return [self.build_enum_type(definition) for definition in SchemaParser.enum_type_definitions(document)]

    def build_object_type(self, type_node: ObjectTypeDefinitionNode) -> TypeDescriptor:
        """Build the descriptor of an object type."""
        fields = [self.build_field(field_node) for field_node in type_node.fields or () if isinstance(field_node, FieldDefinitionNode)]

        return TypeDescriptor(
            name=type_node.name.value,
            fields=fields,
            is_enum=False,
            is_embedded=self.policy.is_embedded_type(type_node),
            database_name=self._database_name(type_node),
            directives=self._directives(type_node),
        )

    def build_enum_type(self, type_node: EnumTypeDefinitionNode) -> TypeDescriptor:
        """Build the descriptor of an enum type.

        Each value becomes a plain scalar field. Embedding is never
        recognized on enums.
        """
        fields = [
            FieldDescriptor(name=value_node.name.value, type_ref=ScalarRef(ENUM_VALUE_TYPE))
            for value_node in type_node.values or ()
            if isinstance(value_node, EnumValueDefinitionNode)
        ]

        return TypeDescriptor(
            name=type_node.name.value,
            fields=fields,
            is_enum=True,
            is_embedded=False,
            directives=self._directives(type_node),
        )

    def build_field(self, field_node: FieldDefinitionNode) -> FieldDescriptor:
        """
        Build the descriptor of a field.

        Args:
            field_node: The field definition node

        Returns:
            FieldDescriptor with an unresolved type reference

        Raises:
            StructuralError: If the field type does not end in a named type
        """
        type_name, modifier = resolve_type(field_node.type)

        is_id = self.policy.is_id_field(field_node)
        is_updated_at = self.policy.is_updated_at_field(field_node)
        is_created_at = self.policy.is_created_at_field(field_node)

        return FieldDescriptor(
            name=field_node.name.value,
            type_ref=ScalarRef(type_name),
            is_list=modifier is TypeModifier.LIST,
            is_required=modifier is TypeModifier.NON_NULL,
            is_unique=is_id or has_directive(field_node, DirectiveKeys.IS_UNIQUE),
            is_id=is_id,
            is_read_only=is_id or is_updated_at or is_created_at,
            is_created_at=is_created_at,
            is_updated_at=is_updated_at,
            default_value=directive_argument(find_directive(field_node, DirectiveKeys.DEFAULT), "value"),
            relation_name=directive_argument(find_directive(field_node, DirectiveKeys.RELATION), "name"),
            related_field=None,
            database_name=self._database_name(field_node),
            directives=self._directives(field_node),
        )

    def _database_name(self, node: Node) -> str | None:
        return directive_argument(find_directive(node, DirectiveKeys.DB), "name")

    def _directives(self, node: Node) -> list[DirectiveInfo]:
        return [
            DirectiveInfo(name=directive.name.value, arguments=directive_arguments(directive))
            for directive in extra_directives(node, self.reserved_directives)
        ]
