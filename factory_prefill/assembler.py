"""Assembly of factory definitions for a model."""

import logging

from factory_prefill.guessing import TypeGuesser
from factory_prefill.models import Column, Definition, ModelInfo
from factory_prefill.relations import RelationClassifier

logger = logging.getLogger(__name__)

# Receiver of generated Faker calls in factory modules
FAKER = "fake"
UNIQUE_FAKER = "fake.unique"

PASSWORD_COLUMN = "password"
PASSWORD_EXPRESSION = "hashlib.sha256(b'password').hexdigest()"


class DefinitionAssembler:
    """
    Build the ordered definition list for a model.

    Column definitions come first (in column order), relation definitions
    after them. A relation definition replaces a column definition for the
    same key; keys whose final expression is None are dropped.

    Example:
        >>> assembler = DefinitionAssembler(TypeGuesser(), RelationClassifier())
        >>> model = ModelInfo(name="User", table="users", columns=[
        ...     Column("email", "varchar(255)", nullable=True, unique=True),
        ... ])
        >>> assembler.assemble(model)
        [Definition(key='email', expression='fake.unique.email()')]
    """

    def __init__(
        self,
        guesser: TypeGuesser,
        classifier: RelationClassifier,
        include_nullable: bool = False,
    ):
        """
        Initialize assembler.

        Args:
            guesser: Column expression guesser
            classifier: Relation classifier
            include_nullable: Include columns regardless of nullability
        """
        self.guesser = guesser
        self.classifier = classifier
        self.include_nullable = include_nullable

    def should_include(self, column: Column, model: ModelInfo) -> bool:
        """
        Check whether a column gets a generated value.

        Args:
            column: Column to check
            model: Model owning the column

        Returns:
            False for generated keys, foreign keys and timestamp columns
        """
        included = (
            (column.nullable or self.include_nullable)
            and not column.auto_increment
            and not column.is_foreign_key
            and not column.is_primary_key
        )
        return included and column.name not in model.timestamp_columns

    def map_column(self, column: Column, model: ModelInfo) -> Definition:
        """Map a single column to its definition."""
        if not self.should_include(column, model):
            return Definition(column.name)

        if column.name == PASSWORD_COLUMN:
            return Definition(column.name, PASSWORD_EXPRESSION)

        receiver = UNIQUE_FAKER if column.unique else FAKER
        guess = self.guesser.guess(column.name, column.raw_type, column.size)
        return Definition(column.name, f"{receiver}.{guess}")

    def assemble(self, model: ModelInfo) -> list[Definition]:
        """
        Build the definitions for a model.

        Args:
            model: Model metadata

        Returns:
            Definitions with one entry per key, in a stable order
        """
        merged: dict[str, str | None] = {}

        for column in model.columns:
            definition = self.map_column(column, model)
            merged[definition.key] = definition.expression

        # Dict assignment keeps the first position and the last value
        for key, expression in self.classifier.classify(model.relations).items():
            merged[key] = expression

        definitions = [
            Definition(key, expression)
            for key, expression in merged.items()
            if expression is not None
        ]
        logger.debug(
            f"Assembled {len(definitions)} definitions for {model.qualified_name} "
            f"({len(model.columns)} columns, {len(model.relations)} relations)"
        )
        return definitions

    def definitions_as_dict(self, model: ModelInfo) -> dict[str, str]:
        """Build the definitions for a model as an ordered key → expression dict."""
        return {d.key: d.expression for d in self.assemble(model) if d.expression}
