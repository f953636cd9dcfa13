"""
Configuration management for factory-prefill.

Loads and validates configuration from factory-prefill.toml files using Pydantic.
Every value can also be set through FACTORY_PREFILL_* environment variables.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from factory_prefill.exceptions import ConfigError

CONFIG_FILENAME = "factory-prefill.toml"


class DatabaseConfig(BaseSettings):
    """Database connection configuration."""

    model_config = SettingsConfigDict(env_prefix="FACTORY_PREFILL_DATABASE_")

    url: str = Field(
        default="postgresql://localhost/myproject_local",
        description="PostgreSQL connection URL",
    )
    schema_name: str = Field(default="public", description="Schema to introspect")


class GenerationConfig(BaseSettings):
    """Factory generation configuration."""

    model_config = SettingsConfigDict(env_prefix="FACTORY_PREFILL_")

    locale: str = Field(default="en_US", description="Faker locale")
    include_nullable: bool = Field(
        default=False, description="Include columns regardless of nullability"
    )
    overwrite: bool = Field(default=False, description="Overwrite existing factory files")
    output_dir: str = Field(
        default="factories", description="Directory for generated factory modules"
    )
    factories_module: str = Field(
        default="factories", description="Import path of the generated factories package"
    )


class NamingConfig(BaseSettings):
    """Table → model naming configuration."""

    model_config = SettingsConfigDict(env_prefix="FACTORY_PREFILL_NAMING_")

    table_prefix: str = Field(
        default="", description="Prefix stripped from table names (e.g. tb_)"
    )


class TimestampConfig(BaseSettings):
    """Automatically maintained timestamp columns, never given factory values."""

    model_config = SettingsConfigDict(env_prefix="FACTORY_PREFILL_TIMESTAMPS_")

    enabled: bool = Field(default=True, description="Whether models use timestamps")
    created_at: str = Field(default="created_at", description="Creation timestamp column")
    updated_at: str = Field(default="updated_at", description="Update timestamp column")
    deleted_at: Optional[str] = Field(
        default="deleted_at", description="Soft-delete timestamp column (optional)"
    )


class Config(BaseSettings):
    """Main configuration for factory-prefill."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    timestamps: TimestampConfig = Field(default_factory=TimestampConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to factory-prefill.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls(**data)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(str(config_path), str(e)) from e
        except ValidationError as e:
            raise ConfigError(str(config_path), str(e)) from e

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from factory-prefill.toml.

        Searches for factory-prefill.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories. "
            f"Run 'factory-prefill init' to create one."
        )

    @classmethod
    def load_or_default(cls, path: Optional[Path | str] = None) -> Config:
        """
        Load the given config file, or the nearest one, or fall back to defaults.

        Args:
            path: Explicit config file path (must exist if given)

        Returns:
            Config instance
        """
        if path is not None:
            return cls.from_toml(path)
        try:
            return cls.find_and_load()
        except FileNotFoundError:
            return cls()

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write factory-prefill.toml
        """
        config_path = Path(path)

        deleted_at = (
            f'deleted_at = "{self.timestamps.deleted_at}"'
            if self.timestamps.deleted_at
            else "# deleted_at = \"deleted_at\""
        )

        # Build TOML content manually for better formatting
        toml_content = f"""# factory-prefill configuration

[database]
url = "{self.database.url}"
schema_name = "{self.database.schema_name}"

[generation]
locale = "{self.generation.locale}"
include_nullable = {str(self.generation.include_nullable).lower()}
overwrite = {str(self.generation.overwrite).lower()}
output_dir = "{self.generation.output_dir}"
factories_module = "{self.generation.factories_module}"

[naming]
table_prefix = "{self.naming.table_prefix}"

[timestamps]
enabled = {str(self.timestamps.enabled).lower()}
created_at = "{self.timestamps.created_at}"
updated_at = "{self.timestamps.updated_at}"
{deleted_at}
"""

        config_path.write_text(toml_content)

    def get_output_dir(self) -> Path:
        """Get the output directory as a Path object."""
        return Path(self.generation.output_dir)
