"""Tests for type modifier resolution"""

import pytest
from graphql.language import ListTypeNode, NameNode, NamedTypeNode, NonNullTypeNode, parse_type

from sdl_datamodel.pipeline.errors import StructuralError
from sdl_datamodel.pipeline.schema_ast.modifiers import (
    TypeModifier,
    resolve_type,
    resolve_type_modifier,
    resolve_type_name,
)


@pytest.mark.parametrize(
    "type_string,expected_name,expected_modifier",
    [
        ("String", "String", TypeModifier.NONE),
        ("String!", "String", TypeModifier.NON_NULL),
        ("[String]", "String", TypeModifier.LIST),
        ("[String]!", "String", TypeModifier.LIST),
        ("[String!]", "String", TypeModifier.LIST),
        ("[String!]!", "String", TypeModifier.LIST),
        ("[[Post!]]", "Post", TypeModifier.LIST),
    ],
)
def test_resolve_type(type_string, expected_name, expected_modifier):
    """Test that the innermost name and the dominant modifier are found"""
    name, modifier = resolve_type(parse_type(type_string))

    assert name == expected_name
    assert modifier is expected_modifier


class TestResolveTypeName:
    """Test resolve_type_name on malformed chains"""

    def test_raises_on_wrapper_without_inner_type(self):
        """Test that a list wrapper with nothing inside is rejected"""
        with pytest.raises(StructuralError):
            resolve_type_name(ListTypeNode(type=None))

    def test_raises_on_non_type_leaf(self):
        """Test that a chain ending in something other than a named type is rejected"""
        with pytest.raises(StructuralError, match="Expected a named type"):
            resolve_type_name(NonNullTypeNode(type=NameNode(value="String")))

    def test_accepts_bare_named_type(self):
        """Test that a named type without wrappers resolves to its own name"""
        assert resolve_type_name(NamedTypeNode(name=NameNode(value="User"))) == "User"


class TestResolveTypeModifier:
    """Test modifier precedence"""

    def test_list_dominates_outer_non_null(self):
        """Test that [String]! is a list and not required"""
        assert resolve_type_modifier(parse_type("[String]!")) is TypeModifier.LIST

    def test_non_null_without_list(self):
        """Test that String! is required"""
        assert resolve_type_modifier(parse_type("String!")) is TypeModifier.NON_NULL

    def test_nullable_scalar(self):
        """Test that a bare named type has no modifier"""
        assert resolve_type_modifier(parse_type("Int")) is TypeModifier.NONE


if __name__ == "__main__":
    pytest.main([__file__])
