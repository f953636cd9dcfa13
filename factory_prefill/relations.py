"""Foreign key relation classification.

Turns belongs-to relations into factory references, so that a factory for
`tb_model` creates its `tb_manufacturer` parent through the manufacturer's
own factory:

    >>> classifier = RelationClassifier(ModelResolver(table_prefix="tb_"))
    >>> classifier.classify([
    ...     Relation("fk_model_manufacturer", RelationKind.BELONGS_TO,
    ...              "fk_manufacturer", "catalog.tb_manufacturer"),
    ... ])
    {'fk_manufacturer': "factory.SubFactory('factories.manufacturer_factory.ManufacturerFactory')"}
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from factory_prefill.models import Relation, RelationKind
from factory_prefill.naming import factory_reference, model_name_for_table

logger = logging.getLogger(__name__)

# Model token used when the related model cannot be determined
UNRESOLVED_MODEL = "REPLACE_THIS"


@dataclass(frozen=True)
class RelationTarget:
    """
    Outcome of resolving the model a relation points at.

    Attributes:
        model_name: Related model class name (None if unresolved)
        reason: Why resolution failed (None if resolved)
    """

    model_name: str | None = None
    reason: str | None = None

    @property
    def resolved(self) -> bool:
        return self.model_name is not None

    @classmethod
    def unresolved(cls, reason: str) -> "RelationTarget":
        return cls(model_name=None, reason=reason)


class ModelResolver:
    """Resolve a qualified table name (schema.table) to a model class name."""

    def __init__(
        self,
        known_tables: Iterable[str] | None = None,
        table_prefix: str = "",
    ):
        """
        Initialize resolver.

        Args:
            known_tables: Qualified table names that get factories. None
                accepts any table.
            table_prefix: Prefix stripped from table names (e.g. "tb_")
        """
        self.known_tables = set(known_tables) if known_tables is not None else None
        self.table_prefix = table_prefix

    def resolve(self, related_type_name: str) -> RelationTarget:
        """
        Resolve the related model of a relation.

        Args:
            related_type_name: Qualified table name of the related model

        Returns:
            RelationTarget, unresolved if the table is unknown
        """
        if self.known_tables is not None and related_type_name not in self.known_tables:
            return RelationTarget.unresolved(
                f"'{related_type_name}' is not part of the introspected schema"
            )

        table = related_type_name.rsplit(".", 1)[-1]
        model_name = model_name_for_table(table, self.table_prefix)
        if not model_name:
            return RelationTarget.unresolved(
                f"no model name can be derived from '{related_type_name}'"
            )
        return RelationTarget(model_name=model_name)


class RelationClassifier:
    """Map belongs-to relations to factory references keyed by FK column."""

    def __init__(self, resolver: ModelResolver | None = None, factories_module: str = "factories"):
        """
        Initialize classifier.

        Args:
            resolver: Related model resolver
            factories_module: Package the generated factories live in
        """
        self.resolver = resolver if resolver is not None else ModelResolver()
        self.factories_module = factories_module

    def classify(self, relations: Sequence[Relation]) -> dict[str, str]:
        """
        Build factory reference expressions for belongs-to relations.

        Args:
            relations: Relations declared by the model

        Returns:
            Ordered mapping of FK column → expression
        """
        definitions: dict[str, str] = {}

        for relation in relations:
            if relation.kind is not RelationKind.BELONGS_TO:
                continue

            target = self.resolver.resolve(relation.related_type_name)
            if not target.resolved:
                logger.warning(
                    f"Could not resolve relation '{relation.accessor_name}' "
                    f"({relation.foreign_key_column}): {target.reason}. "
                    f"Using placeholder {UNRESOLVED_MODEL}."
                )

            definitions[relation.foreign_key_column] = self.reference_expression(target)

        return definitions

    def reference_expression(self, target: RelationTarget) -> str:
        """Get the expression referencing the target's factory."""
        model_name = target.model_name if target.resolved else UNRESOLVED_MODEL
        return f"factory.SubFactory('{factory_reference(model_name, self.factories_module)}')"
