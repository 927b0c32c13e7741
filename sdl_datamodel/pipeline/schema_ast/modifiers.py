"""
Type modifier resolution.

A field's type in SDL is a chain of wrapper nodes (list, non-null)
around a named type. This module finds the innermost name and the
modifier that matters for the datamodel.
"""

from __future__ import annotations

from enum import Enum

from graphql.language import ListTypeNode, NamedTypeNode, Node, NonNullTypeNode

from ..errors import StructuralError

WRAPPER_NODES = (ListTypeNode, NonNullTypeNode)


class TypeModifier(Enum):
    """Outermost significant modifier of a field type."""

    NONE = "none"  # Nullable, single value
    NON_NULL = "non_null"  # Required, single value
    LIST = "list"  # List, regardless of nullability


def resolve_type_name(type_node: Node | None) -> str:
    """
    Find the innermost named type of a type node.

    Args:
        type_node: Root type node of a field definition

    Returns:
        The name of the innermost named type

    Raises:
        StructuralError: If the chain does not end in a named type
    """
    node = type_node
    while isinstance(node, WRAPPER_NODES):
        node = node.type

    if not isinstance(node, NamedTypeNode):
        kind = getattr(node, "kind", None) or type(node).__name__
        raise StructuralError(f"Expected a named type at the end of the modifier chain, got {kind}")

    return node.name.value


def resolve_type_modifier(type_node: Node | None) -> TypeModifier:
    """
    Find the modifier of a type node.

    A list wrapper anywhere in the chain wins. Otherwise a non-null
    wrapper anywhere makes the field required.

    Args:
        type_node: Root type node of a field definition

    Returns:
        The resolved TypeModifier
    """
    modifier = TypeModifier.NONE
    node = type_node
    while isinstance(node, WRAPPER_NODES):
        if isinstance(node, ListTypeNode):
            return TypeModifier.LIST
        modifier = TypeModifier.NON_NULL
        node = node.type
    return modifier


def resolve_type(type_node: Node | None) -> tuple[str, TypeModifier]:
    """Return the innermost type name and the modifier of a type node."""
    return resolve_type_name(type_node), resolve_type_modifier(type_node)
