"""Custom exceptions with helpful error messages."""


class FactoryPrefillError(Exception):
    """Base exception for factory-prefill errors."""

    pass


class SchemaNotFoundError(FactoryPrefillError):
    """Schema does not exist in database."""

    def __init__(self, schema: str):
        super().__init__(
            f"Schema '{schema}' not found in database.\n\n"
            f"Suggestions:\n"
            f"1. Check schema name spelling\n"
            f"2. Pass the schema explicitly: factory-prefill generate --schema <name>\n"
            f"3. Check database connection settings"
        )


class TableNotFoundError(FactoryPrefillError):
    """Table does not exist in schema."""

    def __init__(self, table: str, schema: str):
        super().__init__(
            f"Table '{table}' not found in schema '{schema}'.\n\n"
            f"Suggestions:\n"
            f"1. Check table name spelling\n"
            f"2. Run 'factory-prefill generate' without arguments to cover every table\n"
            f"3. Check that migrations have been applied to '{schema}'"
        )


class NoSchemaDataError(FactoryPrefillError):
    """Introspection returned no columns for a table."""

    def __init__(self, table: str):
        super().__init__(
            f"We could not find any data for the factory of '{table}'.\n\n"
            f"Suggestions:\n"
            f"1. Run your migrations before generating factories\n"
            f"2. Check that the connected role can read information_schema"
        )


class ConfigError(FactoryPrefillError):
    """Configuration file is missing or invalid."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Invalid configuration in '{path}': {reason}\n\n"
            f"Suggestions:\n"
            f"1. Run 'factory-prefill init' to create a default configuration\n"
            f"2. Check the TOML syntax of the file"
        )
