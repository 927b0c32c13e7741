"""
Datamodel parser entry points.

Runs the whole pipeline: SDL text -> document -> type descriptors ->
resolved Model.
"""

from __future__ import annotations

import logging

from graphql.language import DocumentNode, Source

from .analyzer.model_builder import ModelBuilder
from .analyzer.model_nodes import Model
from .analyzer.relation_resolver import RelationResolver
from .config import ParserConfig
from .policy import ClassificationPolicy, build_policy
from .schema_ast.parser import SchemaParser

logger = logging.getLogger(__name__)


class DatamodelParser:
    """Parses an SDL datamodel into a resolved Model."""

    def __init__(self, policy: ClassificationPolicy | None = None, config: ParserConfig | None = None):
        """
        Initialize the parser.

        Args:
            policy: Classification policy. Takes precedence over config.
            config: Parser configuration, used to build the policy when none is given
        """
        self.config = config or ParserConfig()
        self.policy = policy or build_policy(self.config)
        self.schema_parser = SchemaParser()

    def parse_from_schema_string(self, source: str | Source) -> Model:
        """
        Parse a datamodel from SDL text.

        Args:
            source: The SDL text

        Returns:
            The resolved Model

        Raises:
            GraphQLSyntaxError: If the text is not valid SDL
            StructuralError: If a field type is malformed
            RelationMismatchError: If a named relation is inconsistent
        """
        document = self.schema_parser.parse(source)
        return self.parse_from_document(document)

    def parse_from_document(self, document: DocumentNode) -> Model:
        """
        Parse a datamodel from an already parsed document.

        Args:
            document: A graphql-core DocumentNode

        Returns:
            The resolved Model
        """
        types = ModelBuilder(self.policy).build(document)
        RelationResolver(types).resolve()

        model = Model(types=tuple(types))
        logger.debug(
            "Built datamodel with %d types, %d relation fields left unpaired",
            len(model.types),
            len(model.unrelated_fields()),
        )
        return model


def parse_datamodel(source: str | Source, policy: ClassificationPolicy | None = None) -> Model:
    """Parse SDL text into a resolved Model."""
    return DatamodelParser(policy=policy).parse_from_schema_string(source)
