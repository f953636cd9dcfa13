"""Naming conventions shared by relation resolution and the factory writer."""

import re

_WORD_BOUNDARY = re.compile(r"[^0-9a-zA-Z]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def model_name_for_table(table: str, table_prefix: str = "") -> str:
    """
    Derive a model class name from a table name.

    Examples:
        >>> model_name_for_table("tb_manufacturer", "tb_")
        'Manufacturer'
        >>> model_name_for_table("order_items")
        'OrderItems'
    """
    if table_prefix and table.startswith(table_prefix):
        table = table[len(table_prefix) :]
    parts = [part for part in _WORD_BOUNDARY.split(table) if part]
    return "".join(part[:1].upper() + part[1:] for part in parts)


def to_snake_case(name: str) -> str:
    """
    Convert a class name to snake_case.

    Examples:
        >>> to_snake_case("OrderItems")
        'order_items'
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def factory_class_name(model_name: str) -> str:
    """Get the factory class name for a model (e.g. UserFactory)."""
    return f"{model_name}Factory"


def factory_module_name(model_name: str) -> str:
    """Get the factory module name for a model (e.g. user_factory)."""
    return f"{to_snake_case(model_name)}_factory"


def factory_reference(model_name: str, factories_module: str) -> str:
    """
    Get the dotted path of a model's factory class.

    Example:
        >>> factory_reference("User", "factories")
        'factories.user_factory.UserFactory'
    """
    parts = [factories_module, factory_module_name(model_name), factory_class_name(model_name)]
    return ".".join(part for part in parts if part)
