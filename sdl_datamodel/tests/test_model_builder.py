"""Tests for building type descriptors from SDL definitions"""

import pytest
from graphql import parse
from graphql.language import FieldDefinitionNode, ListTypeNode, NameNode

from sdl_datamodel.pipeline.analyzer.model_builder import ModelBuilder
from sdl_datamodel.pipeline.analyzer.model_nodes import DirectiveInfo, ScalarRef
from sdl_datamodel.pipeline.errors import StructuralError
from sdl_datamodel.pipeline.policy import ClassificationPolicy, directive_policy, legacy_policy


def build(sdl: str, policy=None):
    """Helper to build unresolved descriptors from SDL"""
    return ModelBuilder(policy or directive_policy()).build(parse(sdl))


class TestBuildField:
    """Test field descriptor construction"""

    def test_modifiers(self):
        """Test list and required flags"""
        (type_desc,) = build(
            """
            type T {
              a: String
              b: String!
              c: [String]!
              d: [String!]!
            }
            """
        )
        a, b, c, d = type_desc.fields

        assert (a.is_list, a.is_required) == (False, False)
        assert (b.is_list, b.is_required) == (False, True)
        assert (c.is_list, c.is_required) == (True, False)
        assert (d.is_list, d.is_required) == (True, False)

    def test_type_reference_starts_unresolved(self):
        """Test that the type reference is the bare innermost name"""
        (type_desc,) = build("type T { posts: [Post!]! }")

        field = type_desc.fields[0]

        assert field.type_ref == ScalarRef("Post")
        assert field.is_scalar
        assert field.type_name == "Post"
        assert field.related_field is None

    def test_directive_policy_flags(self):
        """Test identity and timestamp flags from directives"""
        (type_desc,) = build(
            """
            type T {
              id: ID! @id
              createdAt: DateTime! @createdAt
              updatedAt: DateTime! @updatedAt
              email: String @unique
              name: String
            }
            """
        )
        id_field, created, updated, email, name = type_desc.fields

        assert id_field.is_id and id_field.is_unique and id_field.is_read_only
        assert created.is_created_at and created.is_read_only and not created.is_unique
        assert updated.is_updated_at and updated.is_read_only
        assert email.is_unique and not email.is_read_only and not email.is_id
        assert not (name.is_unique or name.is_read_only)

    def test_legacy_policy_flags(self):
        """Test identity and timestamp flags from reserved names"""
        (type_desc,) = build(
            "type T { id: ID!, createdAt: DateTime!, updatedAt: DateTime!, other: ID! @id }",
            policy=legacy_policy(),
        )
        id_field, created, updated, other = type_desc.fields

        assert id_field.is_id and id_field.is_unique
        assert created.is_created_at and created.is_read_only
        assert updated.is_updated_at and updated.is_read_only
        assert not other.is_id

    def test_custom_policy(self):
        """Test that caller-supplied predicates drive the flags"""
        policy = ClassificationPolicy(is_id_field=lambda field: field.name.value.endswith("Key"))

        (type_desc,) = build("type T { userKey: String, name: String }", policy=policy)

        assert type_desc.fields[0].is_id
        assert not type_desc.fields[1].is_id

    def test_annotation_values(self):
        """Test default value, relation name and database name"""
        (type_desc,) = build(
            """
            type T {
              status: String @default(value: "draft") @db(name: "status_col")
              owner: User @relation(name: "Ownership")
              plain: String
            }
            """
        )
        status, owner, plain = type_desc.fields

        assert status.default_value == "draft"
        assert status.database_name == "status_col"
        assert owner.relation_name == "Ownership"
        assert plain.default_value is None
        assert plain.relation_name is None
        assert plain.database_name is None

    def test_extra_directives(self):
        """Test that only non-reserved directives are kept"""
        (type_desc,) = build('type T { owner: User @unique @relation(name: "Ownership") @index(order: DESC) }')

        assert type_desc.fields[0].directives == [
            DirectiveInfo(name="relation", arguments={"name": "Ownership"}),
            DirectiveInfo(name="index", arguments={"order": "DESC"}),
        ]

    def test_structural_error(self):
        """Test that a malformed type chain aborts the build"""
        field_node = FieldDefinitionNode(
            name=NameNode(value="broken"),
            type=ListTypeNode(type=None),
            arguments=[],
            directives=[],
        )

        with pytest.raises(StructuralError):
            ModelBuilder().build_field(field_node)


class TestBuildTypes:
    """Test type descriptor construction and assembly"""

    def test_object_type(self):
        """Test object type flags and database name"""
        (type_desc,) = build('type User @db(name: "users") @cache(ttl: 60) { id: ID! @id }')

        assert type_desc.name == "User"
        assert not type_desc.is_enum
        assert not type_desc.is_embedded
        assert type_desc.database_name == "users"
        assert type_desc.directives == [DirectiveInfo(name="cache", arguments={"ttl": "60"})]

    def test_embedded_type(self):
        """Test that the directive policy recognizes embedded types"""
        (type_desc,) = build("type Address @embedded { street: String }")

        assert type_desc.is_embedded
        assert type_desc.directives == []

    def test_legacy_policy_never_embeds(self):
        """Test that the legacy policy ignores @embedded"""
        (type_desc,) = build("type Address @embedded { street: String }", policy=legacy_policy())

        assert not type_desc.is_embedded

    def test_enum_type(self):
        """Test that enum values become plain scalar fields"""
        (type_desc,) = build("enum E { A, B }")

        assert type_desc.is_enum
        assert not type_desc.is_embedded
        assert [f.name for f in type_desc.fields] == ["A", "B"]
        for field in type_desc.fields:
            assert field.is_scalar
            assert not field.is_unique
            assert not field.is_required
            assert not field.is_list
            assert field.relation_name is None

    def test_enum_never_embedded(self):
        """Test that embedding is not recognized on enums"""
        (type_desc,) = build("enum E @embedded { A }")

        assert not type_desc.is_embedded

    def test_sorted_by_name(self):
        """Test that object types and enums are merged and sorted by name"""
        types = build(
            """
            enum Status { OPEN }
            type b { x: String }
            type Zoo { x: String }
            type Apple { x: String }
            """
        )

        assert [t.name for t in types] == ["Apple", "Status", "Zoo", "b"]

    def test_duplicate_names_keep_collection_order(self):
        """Test that the sort is stable for equal names"""
        types = build(
            """
            type A { first: String }
            type A { second: String }
            """
        )

        assert [t.fields[0].name for t in types] == ["first", "second"]

    def test_other_definitions_ignored(self):
        """Test that scalars, inputs, interfaces and unions are skipped"""
        types = build(
            """
            scalar DateTime
            input UserInput { name: String }
            interface Node { id: ID! }
            union Result = User
            type User { id: ID! }
            """
        )

        assert [t.name for t in types] == ["User"]


if __name__ == "__main__":
    pytest.main([__file__])
