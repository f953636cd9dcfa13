"""Fixtures for tests against a live PostgreSQL database."""

import os

import psycopg
import pytest
from psycopg import Connection

DATABASE_URL = os.environ.get(
    "FACTORY_PREFILL_TEST_DATABASE_URL", "postgresql://localhost/factory_prefill_test"
)


@pytest.fixture
def db_conn() -> Connection:
    """Provide a test database connection, skipping when none is available."""
    try:
        conn = psycopg.connect(DATABASE_URL, autocommit=False)
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available at {DATABASE_URL}: {e}")

    yield conn

    conn.rollback()
    conn.close()


@pytest.fixture
def test_schema(db_conn: Connection) -> str:
    """
    Create a test schema with sample tables.

    Returns the schema name.
    """
    schema_name = "test_prefill"

    with db_conn.cursor() as cur:
        cur.execute(f"DROP SCHEMA IF EXISTS {schema_name} CASCADE")
        cur.execute(f"CREATE SCHEMA {schema_name}")

        cur.execute(f"""
            CREATE TABLE {schema_name}.tb_user (
                pk_user INTEGER GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
                email VARCHAR(255) NOT NULL UNIQUE,
                password VARCHAR(255) NOT NULL,
                remember_token VARCHAR(100),
                created_at TIMESTAMPTZ,
                updated_at TIMESTAMPTZ
            )
        """)

        cur.execute(f"""
            CREATE TABLE {schema_name}.tb_car (
                id SERIAL PRIMARY KEY,
                name VARCHAR(100) NOT NULL,
                list_price NUMERIC(10, 2),
                country CHAR(2),
                owner_id INTEGER NOT NULL REFERENCES {schema_name}.tb_user(pk_user),
                region_code TEXT,
                region_number INTEGER,
                created_at TIMESTAMPTZ,
                UNIQUE (region_code, region_number)
            )
        """)

        cur.execute(f"""
            CREATE TABLE {schema_name}.tb_part (
                car_id INTEGER NOT NULL,
                part_number INTEGER NOT NULL,
                parent_car_id INTEGER,
                parent_part_number INTEGER,
                PRIMARY KEY (car_id, part_number),
                FOREIGN KEY (parent_car_id, parent_part_number)
                    REFERENCES {schema_name}.tb_part(car_id, part_number)
            )
        """)

        db_conn.commit()

    yield schema_name

    with db_conn.cursor() as cur:
        cur.execute(f"DROP SCHEMA IF EXISTS {schema_name} CASCADE")
        db_conn.commit()
