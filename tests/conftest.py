"""Pytest configuration and shared fixtures."""

import pytest
from faker import Faker

from factory_prefill import (
    Column,
    DefinitionAssembler,
    ModelInfo,
    ModelResolver,
    NativeGeneratorCatalog,
    Relation,
    RelationClassifier,
    RelationKind,
    TypeGuesser,
)
from factory_prefill.exceptions import TableNotFoundError


@pytest.fixture(scope="session")
def catalog() -> NativeGeneratorCatalog:
    """Faker method catalog shared by the whole test session (built once)."""
    return NativeGeneratorCatalog(Faker("en_US"))


@pytest.fixture
def guesser(catalog: NativeGeneratorCatalog) -> TypeGuesser:
    """en_US type guesser."""
    return TypeGuesser(locale="en_US", catalog=catalog)


@pytest.fixture
def classifier() -> RelationClassifier:
    """Relation classifier knowing the sample catalog tables."""
    resolver = ModelResolver(
        known_tables={"catalog.tb_user", "catalog.tb_manufacturer", "catalog.tb_car"},
        table_prefix="tb_",
    )
    return RelationClassifier(resolver, factories_module="factories")


@pytest.fixture
def assembler(guesser: TypeGuesser, classifier: RelationClassifier) -> DefinitionAssembler:
    """Assembler including NOT NULL columns."""
    return DefinitionAssembler(guesser, classifier, include_nullable=True)


@pytest.fixture
def car_model() -> ModelInfo:
    """
    Car model with keys, timestamps, a unique column and two owners.

    Mirrors:
        CREATE TABLE catalog.tb_car (
            pk_car INTEGER GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
            name VARCHAR(100) NOT NULL,
            plate_label VARCHAR(17) NOT NULL UNIQUE,
            factory_year INTEGER,
            list_price NUMERIC(10, 2),
            owner_id INTEGER NOT NULL REFERENCES catalog.tb_user,
            previous_owner_id INTEGER REFERENCES catalog.tb_user,
            created_at TIMESTAMPTZ,
            updated_at TIMESTAMPTZ,
            deleted_at TIMESTAMPTZ
        )
    """
    return ModelInfo(
        name="Car",
        table="tb_car",
        schema="catalog",
        columns=[
            Column("pk_car", "integer", nullable=False, auto_increment=True, is_primary_key=True),
            Column("name", "character varying", length=100),
            Column("plate_label", "character varying", length=17, unique=True),
            Column("factory_year", "integer", nullable=True),
            Column("list_price", "numeric", length=10, precision=2, nullable=True),
            Column("owner_id", "integer", is_foreign_key=True),
            Column("previous_owner_id", "integer", nullable=True, is_foreign_key=True),
            Column("created_at", "timestamp with time zone", nullable=True),
            Column("updated_at", "timestamp with time zone", nullable=True),
            Column("deleted_at", "timestamp with time zone", nullable=True),
        ],
        relations=[
            Relation("fk_car_owner", RelationKind.BELONGS_TO, "owner_id", "catalog.tb_user"),
            Relation(
                "fk_car_previous_owner",
                RelationKind.BELONGS_TO,
                "previous_owner_id",
                "catalog.tb_user",
            ),
        ],
    )


@pytest.fixture
def user_model() -> ModelInfo:
    """User model with a password column and a has-many relation."""
    return ModelInfo(
        name="User",
        table="tb_user",
        schema="catalog",
        columns=[
            Column("pk_user", "integer", auto_increment=True, is_primary_key=True),
            Column("email", "character varying", length=255, unique=True),
            Column("password", "character varying", length=255),
            Column("remember_token", "character varying", length=100, nullable=True),
        ],
        relations=[
            Relation("fk_car_owner", RelationKind.HAS_MANY, "owner_id", "catalog.tb_car"),
        ],
    )


class FakeIntrospector:
    """In-memory stand-in for SchemaIntrospector."""

    def __init__(self, *models: ModelInfo, schema: str = "catalog"):
        self.schema = schema
        self.models = {model.table: model for model in models}

    def get_tables(self) -> list[str]:
        return sorted(self.models)

    def known_tables(self) -> set[str]:
        return {f"{self.schema}.{table}" for table in self.models}

    def get_model_info(self, table_name: str) -> ModelInfo:
        if table_name not in self.models:
            raise TableNotFoundError(table_name, self.schema)
        return self.models[table_name]


@pytest.fixture
def introspector(car_model: ModelInfo, user_model: ModelInfo) -> FakeIntrospector:
    """Introspector serving the car and user models."""
    return FakeIntrospector(car_model, user_model)


@pytest.fixture
def make_introspector():
    """Build introspectors serving arbitrary models."""
    return FakeIntrospector
