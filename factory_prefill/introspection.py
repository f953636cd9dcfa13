"""Schema introspection producing model metadata for factory generation."""

import logging

from psycopg import Connection

from factory_prefill.config import NamingConfig, TimestampConfig
from factory_prefill.exceptions import SchemaNotFoundError, TableNotFoundError
from factory_prefill.models import Column, ModelInfo, Relation, RelationKind
from factory_prefill.naming import model_name_for_table

logger = logging.getLogger(__name__)

# information_schema.columns.data_type values whose numeric_precision and
# numeric_scale are decimal digits
NUMERIC_TYPES = {"numeric", "decimal"}


class SchemaIntrospector:
    """Introspect PostgreSQL schema with caching."""

    def __init__(
        self,
        conn: Connection,
        schema: str,
        naming: NamingConfig | None = None,
        timestamps: TimestampConfig | None = None,
    ):
        self.conn = conn
        self.schema = schema
        self.naming = naming if naming is not None else NamingConfig()
        self.timestamps = timestamps if timestamps is not None else TimestampConfig()
        self._model_cache: dict[str, ModelInfo] = {}
        self._tables: list[str] | None = None

        # Validate schema exists
        self._validate_schema()

    def _validate_schema(self) -> None:
        """Validate that schema exists in database."""
        with self.conn.cursor() as cur:
            cur.execute(
                "SELECT EXISTS(SELECT 1 FROM information_schema.schemata WHERE schema_name = %s)",
                (self.schema,),
            )
            exists = cur.fetchone()[0]
            if not exists:
                raise SchemaNotFoundError(self.schema)

    def get_tables(self) -> list[str]:
        """Get all base table names in schema (cached)."""
        if self._tables is not None:
            return list(self._tables)

        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT table_name
                FROM information_schema.tables
                WHERE table_schema = %s
                  AND table_type = 'BASE TABLE'
                ORDER BY table_name
                """,
                (self.schema,),
            )
            rows = cur.fetchall()

        self._tables = [row[0] for row in rows]
        return list(self._tables)

    def known_tables(self) -> set[str]:
        """Get qualified names (schema.table) of all tables in schema."""
        return {f"{self.schema}.{table}" for table in self.get_tables()}

    def get_model_info(self, table_name: str) -> ModelInfo:
        """Get complete model information for a table (cached)."""
        if table_name in self._model_cache:
            return self._model_cache[table_name]

        if table_name not in self.get_tables():
            raise TableNotFoundError(table_name, self.schema)

        model = ModelInfo(
            name=model_name_for_table(table_name, self.naming.table_prefix),
            table=table_name,
            schema=self.schema,
            columns=self.get_columns(table_name),
            relations=self.get_relations(table_name),
            uses_timestamps=self.timestamps.enabled,
            created_at_column=self.timestamps.created_at,
            updated_at_column=self.timestamps.updated_at,
            deleted_at_column=self.timestamps.deleted_at,
        )
        self._model_cache[table_name] = model
        return model

    def get_columns(self, table_name: str) -> list[Column]:
        """Get all columns for a table with key and constraint flags."""
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT
                    c.column_name,
                    c.data_type,
                    c.character_maximum_length,
                    c.numeric_precision,
                    c.numeric_scale,
                    c.is_nullable,
                    c.is_identity,
                    c.column_default,
                    COALESCE(bool_or(tc.constraint_type = 'PRIMARY KEY'), false) AS is_pk,
                    COALESCE(
                        bool_or(tc.constraint_type = 'UNIQUE' AND cs.n_columns = 1), false
                    ) AS is_unique,
                    COALESCE(bool_or(tc.constraint_type = 'FOREIGN KEY'), false) AS is_fk
                FROM information_schema.columns c
                LEFT JOIN information_schema.key_column_usage kcu
                  ON kcu.table_schema = c.table_schema
                  AND kcu.table_name = c.table_name
                  AND kcu.column_name = c.column_name
                LEFT JOIN information_schema.table_constraints tc
                  ON tc.constraint_name = kcu.constraint_name
                  AND tc.table_schema = kcu.table_schema
                  AND tc.table_name = kcu.table_name
                LEFT JOIN (
                    SELECT constraint_schema, constraint_name, count(*) AS n_columns
                    FROM information_schema.key_column_usage
                    GROUP BY constraint_schema, constraint_name
                ) cs
                  ON cs.constraint_schema = tc.constraint_schema
                  AND cs.constraint_name = tc.constraint_name
                WHERE c.table_schema = %s
                  AND c.table_name = %s
                GROUP BY
                    c.column_name, c.data_type, c.character_maximum_length,
                    c.numeric_precision, c.numeric_scale, c.is_nullable,
                    c.is_identity, c.column_default, c.ordinal_position
                ORDER BY c.ordinal_position
                """,
                (self.schema, table_name),
            )
            rows = cur.fetchall()

        return [self._column_from_row(row) for row in rows]

    @staticmethod
    def _column_from_row(row: tuple) -> Column:
        (name, data_type, char_length, num_precision, num_scale,
         is_nullable, is_identity, default, is_pk, is_unique, is_fk) = row

        length = char_length
        precision = None
        if data_type in NUMERIC_TYPES and num_precision is not None:
            length = num_precision
            precision = num_scale

        auto_increment = is_identity == "YES" or (
            default is not None and str(default).startswith("nextval(")
        )

        return Column(
            name=name,
            raw_type=data_type,
            length=length,
            precision=precision,
            nullable=is_nullable == "YES",
            unique=is_unique,
            auto_increment=auto_increment,
            is_primary_key=is_pk,
            is_foreign_key=is_fk,
        )

    def get_relations(self, table_name: str) -> list[Relation]:
        """
        Get relations of a table from its foreign keys.

        Outgoing single-column foreign keys are BELONGS_TO relations, foreign
        keys of other tables referencing this one are HAS_MANY relations.
        """
        with self.conn.cursor() as cur:
            cur.execute(
                """
                SELECT
                    tc.constraint_name,
                    kcu.table_schema,
                    kcu.table_name,
                    kcu.column_name,
                    ccu.table_schema AS foreign_table_schema,
                    ccu.table_name AS foreign_table_name
                FROM information_schema.table_constraints AS tc
                JOIN information_schema.key_column_usage AS kcu
                  ON tc.constraint_name = kcu.constraint_name
                  AND tc.table_schema = kcu.table_schema
                JOIN information_schema.constraint_column_usage AS ccu
                  ON ccu.constraint_name = tc.constraint_name
                  AND ccu.constraint_schema = tc.constraint_schema
                WHERE tc.constraint_type = 'FOREIGN KEY'
                  AND (
                    (tc.table_schema = %s AND tc.table_name = %s)
                    OR (ccu.table_schema = %s AND ccu.table_name = %s)
                  )
                ORDER BY tc.constraint_name, kcu.ordinal_position
                """,
                (self.schema, table_name, self.schema, table_name),
            )
            rows = cur.fetchall()

        columns_by_constraint: dict[str, list[tuple]] = {}
        for row in rows:
            columns_by_constraint.setdefault(row[0], []).append(row)

        relations = []
        for constraint, constraint_rows in columns_by_constraint.items():
            if len({r[3] for r in constraint_rows}) > 1:
                logger.debug(f"Skipping composite foreign key '{constraint}'")
                continue

            _, schema, table, column, foreign_schema, foreign_table = constraint_rows[0]
            if schema == self.schema and table == table_name:
                relations.append(
                    Relation(
                        accessor_name=constraint,
                        kind=RelationKind.BELONGS_TO,
                        foreign_key_column=column,
                        related_type_name=f"{foreign_schema}.{foreign_table}",
                    )
                )
            else:
                relations.append(
                    Relation(
                        accessor_name=constraint,
                        kind=RelationKind.HAS_MANY,
                        foreign_key_column=column,
                        related_type_name=f"{schema}.{table}",
                    )
                )

        return relations

    def clear_cache(self) -> None:
        """Clear cached introspection data."""
        self._model_cache.clear()
        self._tables = None
