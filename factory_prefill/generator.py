"""FactoryGenerator: introspect, assemble and write factories."""

import logging
from pathlib import Path

from factory_prefill.assembler import DefinitionAssembler
from factory_prefill.config import Config
from factory_prefill.exceptions import NoSchemaDataError
from factory_prefill.guessing import NativeGeneratorCatalog, TypeGuesser
from factory_prefill.introspection import SchemaIntrospector
from factory_prefill.models import Definition
from factory_prefill.relations import ModelResolver, RelationClassifier
from factory_prefill.writer import FactoryWriter

logger = logging.getLogger(__name__)


class FactoryGenerator:
    """Generate factory modules for the tables of one schema."""

    def __init__(
        self,
        introspector: SchemaIntrospector,
        assembler: DefinitionAssembler,
        writer: FactoryWriter,
    ):
        self.introspector = introspector
        self.assembler = assembler
        self.writer = writer

    @classmethod
    def from_config(
        cls,
        introspector: SchemaIntrospector,
        config: Config,
        catalog: NativeGeneratorCatalog | None = None,
    ) -> "FactoryGenerator":
        """
        Wire a generator from configuration.

        Args:
            introspector: Introspector for the target schema
            config: Loaded configuration
            catalog: Shared Faker method catalog (built once if omitted)

        Returns:
            FactoryGenerator instance
        """
        generation = config.generation
        guesser = TypeGuesser(locale=generation.locale, catalog=catalog)
        resolver = ModelResolver(
            known_tables=introspector.known_tables(),
            table_prefix=config.naming.table_prefix,
        )
        classifier = RelationClassifier(resolver, factories_module=generation.factories_module)
        assembler = DefinitionAssembler(
            guesser, classifier, include_nullable=generation.include_nullable
        )
        writer = FactoryWriter(
            config.get_output_dir(), locale=generation.locale, overwrite=generation.overwrite
        )
        return cls(introspector, assembler, writer)

    def definitions(self, table: str) -> list[Definition]:
        """
        Assemble definitions for a table without writing anything.

        Raises:
            TableNotFoundError: If table doesn't exist in schema
            NoSchemaDataError: If the table has no columns
        """
        model = self.introspector.get_model_info(table)
        if not model.columns:
            raise NoSchemaDataError(table)
        return self.assembler.assemble(model)

    def generate(self, table: str) -> Path | None:
        """
        Generate the factory module for a table.

        Args:
            table: Table name

        Returns:
            Written path, or None if the factory already exists
        """
        model = self.introspector.get_model_info(table)
        if not self.writer.overwrite and self.writer.factory_exists(model):
            return None

        return self.writer.write(model, self.definitions(table))

    def generate_all(self, tables: list[str] | None = None) -> dict[str, Path | None]:
        """
        Generate factories for several tables.

        Args:
            tables: Table names (default: every table in schema)

        Returns:
            Table name → written path (None when skipped)
        """
        if not tables:
            tables = self.introspector.get_tables()

        results: dict[str, Path | None] = {}
        for table in tables:
            results[table] = self.generate(table)
        return results
