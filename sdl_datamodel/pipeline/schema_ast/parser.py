"""
SDL source parser.

Phase 1 of the pipeline: turn SDL text into a graphql-core document
and pick out the definitions the datamodel cares about.
"""

from __future__ import annotations

from graphql import parse
from graphql.language import DocumentNode, EnumTypeDefinitionNode, ObjectTypeDefinitionNode, Source


class SchemaParser:
    """Parses SDL source text into a document tree."""

    def parse(self, source: str | Source) -> DocumentNode:
        """
        Parse SDL source text.

        Args:
            source: The SDL text (or a graphql-core Source)

        Returns:
            The parsed DocumentNode

        Raises:
            GraphQLSyntaxError: If the text is not valid SDL
        """
        return parse(source, no_location=True)

    @staticmethod
    def object_type_definitions(document: DocumentNode) -> list[ObjectTypeDefinitionNode]:
        """Return the object type definitions of a document, in source order."""
        return [definition for definition in document.definitions if isinstance(definition, ObjectTypeDefinitionNode)]

    @staticmethod
    def enum_type_definitions(document: DocumentNode) -> list[EnumTypeDefinitionNode]:
        """Return the enum type definitions of a document, in source order."""
        return [definition for definition in document.definitions if isinstance(definition, EnumTypeDefinitionNode)]
