"""CLI commands for factory-prefill."""

import logging
import sys
from pathlib import Path

import click
import psycopg

from factory_prefill.config import CONFIG_FILENAME, Config
from factory_prefill.exceptions import ConfigError, FactoryPrefillError
from factory_prefill.generator import FactoryGenerator
from factory_prefill.introspection import SchemaIntrospector


def _load_config(
    config_path: str | None,
    database_url: str | None = None,
    schema: str | None = None,
    **generation: object,
) -> Config:
    """Load configuration and apply command line overrides."""
    try:
        config = Config.load_or_default(config_path)
    except FileNotFoundError as e:
        raise ConfigError(str(config_path), "file not found") from e

    if database_url is not None:
        config.database.url = database_url
    if schema is not None:
        config.database.schema_name = schema
    for key, value in generation.items():
        # Flags left at their default do not override the config file
        if value is not None and value is not False:
            setattr(config.generation, key, value)

    return config


def _pluralize(count: int) -> str:
    return "factory" if count == 1 else "factories"


@click.group()
@click.version_option(package_name="factory-prefill")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """factory-prefill - Generate prefilled data factories from a database schema."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("tables", nargs=-1)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Config file")
@click.option("--database-url", help="PostgreSQL connection URL")
@click.option("--schema", help="Schema to introspect")
@click.option("--output-dir", type=click.Path(file_okay=False), help="Factory output directory")
@click.option("--locale", help="Faker locale (e.g. en_US)")
@click.option("-i", "--include-nullable", is_flag=True, help="Include columns regardless of nullability")
@click.option("--overwrite", is_flag=True, help="Overwrite existing factory files")
def generate(
    tables: tuple[str, ...],
    config_path: str | None,
    database_url: str | None,
    schema: str | None,
    output_dir: str | None,
    locale: str | None,
    include_nullable: bool,
    overwrite: bool,
) -> None:
    """Generate factories for TABLES (default: every table in schema)."""
    try:
        config = _load_config(
            config_path,
            database_url,
            schema,
            output_dir=output_dir,
            locale=locale,
            include_nullable=include_nullable,
            overwrite=overwrite,
        )

        with psycopg.connect(config.database.url) as conn:
            introspector = SchemaIntrospector(
                conn, config.database.schema_name, config.naming, config.timestamps
            )
            generator = FactoryGenerator.from_config(introspector, config)

            created = 0
            for table in tables or introspector.get_tables():
                try:
                    path = generator.generate(table)
                except FactoryPrefillError as e:
                    click.echo(f"No factory produced for [{table}]: {e}", err=True)
                    continue

                if path is None:
                    click.echo(f"Factory already exists for model [{table}]")
                    continue

                click.echo(f"Created {path}")
                created += 1
    except (FactoryPrefillError, psycopg.Error) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{created} {_pluralize(created)} created")


@cli.command()
@click.argument("table")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Config file")
@click.option("--database-url", help="PostgreSQL connection URL")
@click.option("--schema", help="Schema to introspect")
@click.option("--locale", help="Faker locale (e.g. en_US)")
@click.option("-i", "--include-nullable", is_flag=True, help="Include columns regardless of nullability")
def preview(
    table: str,
    config_path: str | None,
    database_url: str | None,
    schema: str | None,
    locale: str | None,
    include_nullable: bool,
) -> None:
    """Print the definitions for TABLE without writing a factory."""
    try:
        config = _load_config(
            config_path, database_url, schema, locale=locale, include_nullable=include_nullable
        )

        with psycopg.connect(config.database.url) as conn:
            introspector = SchemaIntrospector(
                conn, config.database.schema_name, config.naming, config.timestamps
            )
            generator = FactoryGenerator.from_config(introspector, config)
            definitions = generator.definitions(table)
    except (FactoryPrefillError, psycopg.Error) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for definition in definitions:
        click.echo(f"{definition.key}: {definition.expression}")


@cli.command()
@click.option("--path", type=click.Path(dir_okay=False), default=CONFIG_FILENAME, help="Config file to create")
@click.option("--force", is_flag=True, help="Replace an existing config file")
def init(path: str, force: bool) -> None:
    """Create a default factory-prefill.toml."""
    config_path = Path(path)
    if config_path.exists() and not force:
        click.echo(f"Error: {config_path} already exists (use --force to replace it)", err=True)
        sys.exit(1)

    Config().to_toml(config_path)
    click.echo(f"✓ Created {config_path}")


if __name__ == "__main__":
    cli()
