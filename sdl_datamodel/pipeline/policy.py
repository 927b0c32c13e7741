"""
Classification policies.

A policy decides which fields are identity or timestamp fields and
which types are embedded. Conventions differ between database flavours,
so the parser takes them as four plain callables.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from graphql.language import FieldDefinitionNode, ObjectTypeDefinitionNode

from .config import POLICY_DIRECTIVE, POLICY_LEGACY, POLICY_NAMES, ParserConfig
from .errors import ConfigError
from .schema_ast.directives import DirectiveKeys, has_directive

FieldPredicate = Callable[[FieldDefinitionNode], bool]
TypePredicate = Callable[[ObjectTypeDefinitionNode], bool]


def _never(_node) -> bool:
    return False


@dataclass(frozen=True)
class ClassificationPolicy:
    """Predicates over raw definition nodes used by the model builder."""

    is_id_field: FieldPredicate = _never
    is_updated_at_field: FieldPredicate = _never
    is_created_at_field: FieldPredicate = _never
    is_embedded_type: TypePredicate = _never


def _field_has(directive_name: str) -> FieldPredicate:
    def predicate(field: FieldDefinitionNode) -> bool:
        return has_directive(field, directive_name)

    return predicate


def _field_named(field_name: str) -> FieldPredicate:
    def predicate(field: FieldDefinitionNode) -> bool:
        return field.name.value == field_name

    return predicate


def directive_policy() -> ClassificationPolicy:
    """Policy where ``@id``, ``@updatedAt``, ``@createdAt`` and ``@embedded`` mark fields and types."""
    return ClassificationPolicy(
        is_id_field=_field_has(DirectiveKeys.IS_ID),
        is_updated_at_field=_field_has(DirectiveKeys.IS_UPDATED_AT),
        is_created_at_field=_field_has(DirectiveKeys.IS_CREATED_AT),
        is_embedded_type=lambda type_node: has_directive(type_node, DirectiveKeys.IS_EMBEDDED),
    )


def legacy_policy(
    id_field_name: str = "id",
    created_at_field_name: str = "createdAt",
    updated_at_field_name: str = "updatedAt",
) -> ClassificationPolicy:
    """Policy where reserved field names mark identity and timestamp fields. No type is embedded."""
    return ClassificationPolicy(
        is_id_field=_field_named(id_field_name),
        is_updated_at_field=_field_named(updated_at_field_name),
        is_created_at_field=_field_named(created_at_field_name),
        is_embedded_type=_never,
    )


def build_policy(config: ParserConfig) -> ClassificationPolicy:
    """
    Build the policy selected by a config.

    Args:
        config: Parser configuration

    Returns:
        The matching ClassificationPolicy

    Raises:
        ConfigError: If the policy name is unknown
    """
    if config.policy == POLICY_DIRECTIVE:
        return directive_policy()
    if config.policy == POLICY_LEGACY:
        return legacy_policy(
            id_field_name=config.id_field_name,
            created_at_field_name=config.created_at_field_name,
            updated_at_field_name=config.updated_at_field_name,
        )
    raise ConfigError(f"Unknown policy '{config.policy}', expected one of: {', '.join(POLICY_NAMES)}")
