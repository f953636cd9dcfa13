"""Data models and type definitions."""

import re
from dataclasses import dataclass, field
from enum import Enum

_SIZE_SUFFIX = re.compile(r"\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\)")


@dataclass(frozen=True)
class Column:
    """
    Column metadata from schema introspection.

    Attributes:
        name: Column name
        raw_type: Database type, optionally with a size suffix (e.g. numeric(10,2))
        length: Character length or numeric precision (digits)
        precision: Numeric scale (digits after the decimal point)
        nullable: Whether column allows NULL values
        unique: Whether column has a single-column UNIQUE constraint
        auto_increment: Whether the database assigns the value (identity/serial)
        is_primary_key: Whether column is (part of) the primary key
        is_foreign_key: Whether column is the local side of a foreign key
    """

    name: str
    raw_type: str
    length: int | None = None
    precision: int | None = None
    nullable: bool = False
    unique: bool = False
    auto_increment: bool = False
    is_primary_key: bool = False
    is_foreign_key: bool = False

    def __post_init__(self) -> None:
        if self.length is not None:
            return

        match = _SIZE_SUFFIX.search(self.raw_type)
        if match is None:
            return

        # Frozen dataclass: derive length/precision from the raw type suffix
        object.__setattr__(self, "length", int(match.group(1)))
        if match.group(2) is not None and self.precision is None:
            object.__setattr__(self, "precision", int(match.group(2)))

    @property
    def size(self) -> str | None:
        """
        Size as understood by the type guesser.

        Returns:
            "length,precision", "length" or None when no size is known
        """
        if self.length is None:
            return None
        if self.precision is not None:
            return f"{self.length},{self.precision}"
        return str(self.length)


class RelationKind(str, Enum):
    """Cardinality of a relation, seen from the model declaring it."""

    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"


@dataclass(frozen=True)
class Relation:
    """
    Relationship metadata.

    Attributes:
        accessor_name: Name of the relation (FK constraint name for tables)
        kind: Relation cardinality
        foreign_key_column: Column holding the reference
        related_type_name: Qualified name of the related model (schema.table)
    """

    accessor_name: str
    kind: RelationKind
    foreign_key_column: str
    related_type_name: str


@dataclass(frozen=True)
class Definition:
    """
    Generated value definition for one attribute.

    An expression of None means the key must not appear in the factory.
    """

    key: str
    expression: str | None = None


@dataclass
class ModelInfo:
    """
    Model metadata consumed by the definition assembler.

    Attributes:
        name: Model class name (e.g. Manufacturer)
        table: Table name
        schema: Schema name
        columns: Columns in introspection order
        relations: Declared relations
        uses_timestamps: Whether timestamp columns are maintained automatically
        created_at_column: Creation timestamp column name
        updated_at_column: Update timestamp column name
        deleted_at_column: Soft-delete timestamp column name (if any)
    """

    name: str
    table: str
    schema: str = "public"
    columns: list[Column] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)
    uses_timestamps: bool = True
    created_at_column: str = "created_at"
    updated_at_column: str = "updated_at"
    deleted_at_column: str | None = "deleted_at"

    @property
    def qualified_name(self) -> str:
        """Get fully qualified table name."""
        return f"{self.schema}.{self.table}"

    @property
    def timestamp_columns(self) -> frozenset[str]:
        """
        Get the columns managed as timestamps.

        Returns:
            Column names, or an empty set when timestamps are not in use
        """
        if not self.uses_timestamps:
            return frozenset()

        names = {self.created_at_column, self.updated_at_column}
        if self.deleted_at_column:
            names.add(self.deleted_at_column)
        return frozenset(names)
