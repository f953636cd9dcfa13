"""Type-based fallback expressions."""

import re
from enum import Enum

_SIZE_SUFFIX = re.compile(r"\s*\(.*\)\s*$")
_SIZE_ARGUMENTS = re.compile(r"\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\)\s*$")


class TypeCategory(str, Enum):
    """Canonical type categories that raw database types reduce to."""

    BOOLEAN = "boolean"
    TEXT = "text"
    INTEGER = "integer"
    DATE = "date"
    FLOAT = "float"
    TIME = "time"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    JSON = "json"
    UUID = "uuid"
    IP_ADDRESS = "ip_address"
    MAC_ADDRESS = "mac_address"
    YEAR = "year"
    CHAR = "char"
    STRING = "string"
    BINARY = "binary"
    GEOMETRY = "geometry"
    GEOGRAPHY = "geography"


# Vendor spellings → category. Exact spellings (tinyint(1)) are tried before
# the spelling without its size suffix.
TYPE_ALIASES: dict[str, TypeCategory] = {
    # Boolean
    "boolean": TypeCategory.BOOLEAN,
    "bool": TypeCategory.BOOLEAN,
    "bit": TypeCategory.BOOLEAN,
    "tinyint(1)": TypeCategory.BOOLEAN,
    # Integer
    "integer": TypeCategory.INTEGER,
    "int": TypeCategory.INTEGER,
    "int2": TypeCategory.INTEGER,
    "int4": TypeCategory.INTEGER,
    "int8": TypeCategory.INTEGER,
    "smallint": TypeCategory.INTEGER,
    "mediumint": TypeCategory.INTEGER,
    "bigint": TypeCategory.INTEGER,
    "tinyint": TypeCategory.INTEGER,
    "serial": TypeCategory.INTEGER,
    "smallserial": TypeCategory.INTEGER,
    "bigserial": TypeCategory.INTEGER,
    # Float
    "float": TypeCategory.FLOAT,
    "float4": TypeCategory.FLOAT,
    "float8": TypeCategory.FLOAT,
    "real": TypeCategory.FLOAT,
    "double": TypeCategory.FLOAT,
    "double precision": TypeCategory.FLOAT,
    "decimal": TypeCategory.FLOAT,
    "numeric": TypeCategory.FLOAT,
    "money": TypeCategory.FLOAT,
    # Text
    "text": TypeCategory.TEXT,
    "tinytext": TypeCategory.TEXT,
    "mediumtext": TypeCategory.TEXT,
    "longtext": TypeCategory.TEXT,
    "ntext": TypeCategory.TEXT,
    # String
    "string": TypeCategory.STRING,
    "varchar": TypeCategory.STRING,
    "nvarchar": TypeCategory.STRING,
    "character varying": TypeCategory.STRING,
    "citext": TypeCategory.STRING,
    # Char
    "char": TypeCategory.CHAR,
    "nchar": TypeCategory.CHAR,
    "bpchar": TypeCategory.CHAR,
    "character": TypeCategory.CHAR,
    # Date / time
    "date": TypeCategory.DATE,
    "datetime": TypeCategory.DATETIME,
    "datetime2": TypeCategory.DATETIME,
    "datetimeoffset": TypeCategory.DATETIME,
    "smalldatetime": TypeCategory.DATETIME,
    "timestamp without time zone": TypeCategory.DATETIME,
    "timestamp with time zone": TypeCategory.DATETIME,
    "timestamptz": TypeCategory.DATETIME,
    "timestamp": TypeCategory.TIMESTAMP,
    "time": TypeCategory.TIME,
    "timetz": TypeCategory.TIME,
    "time without time zone": TypeCategory.TIME,
    "time with time zone": TypeCategory.TIME,
    "year": TypeCategory.YEAR,
    # Structured / identifiers
    "json": TypeCategory.JSON,
    "jsonb": TypeCategory.JSON,
    "uuid": TypeCategory.UUID,
    "uniqueidentifier": TypeCategory.UUID,
    # Network
    "inet": TypeCategory.IP_ADDRESS,
    "inet4": TypeCategory.IP_ADDRESS,
    "inet6": TypeCategory.IP_ADDRESS,
    "cidr": TypeCategory.IP_ADDRESS,
    "macaddr": TypeCategory.MAC_ADDRESS,
    "macaddr8": TypeCategory.MAC_ADDRESS,
    # Binary
    "binary": TypeCategory.BINARY,
    "varbinary": TypeCategory.BINARY,
    "blob": TypeCategory.BINARY,
    "bytea": TypeCategory.BINARY,
    # Spatial
    "geometry": TypeCategory.GEOMETRY,
    "point": TypeCategory.GEOMETRY,
    "linestring": TypeCategory.GEOMETRY,
    "polygon": TypeCategory.GEOMETRY,
    "geography": TypeCategory.GEOGRAPHY,
}

# Category → fixed expression
TYPE_EXPRESSIONS: dict[str, str] = {
    TypeCategory.BOOLEAN.value: "boolean()",
    TypeCategory.CHAR.value: "random_letter()",
    TypeCategory.DATE.value: "date()",
    TypeCategory.DATETIME.value: "date_time()",
    TypeCategory.IP_ADDRESS.value: "ipv4()",
    TypeCategory.MAC_ADDRESS.value: "mac_address()",
    TypeCategory.TEXT.value: "paragraph()",
    TypeCategory.TIME.value: "time()",
    TypeCategory.TIMESTAMP.value: "unix_time()",
    TypeCategory.UUID.value: "uuid4()",
    TypeCategory.YEAR.value: "year()",
}

DEFAULT_EXPRESSION = "word()"


def _to_int(value: str) -> int | None:
    value = value.strip()
    return int(value) if value.isdigit() else None


def parse_size(size: int | str | None) -> tuple[int | None, int]:
    """
    Split a size into length and precision.

    Args:
        size: None, an int length, or a "length" / "length,precision" string

    Returns:
        (length, precision); precision is 0 unless the size has a comma

    Examples:
        >>> parse_size("10,2")
        (10, 2)
        >>> parse_size(255)
        (255, 0)
        >>> parse_size(None)
        (None, 0)
    """
    if size is None:
        return None, 0
    if isinstance(size, int):
        return size, 0

    if "," in size:
        length, precision = size.split(",", 1)
        return _to_int(length), _to_int(precision) or 0
    return _to_int(size), 0


def size_from_type(raw_type: str) -> str | None:
    """
    Get the size carried by a raw type suffix.

    Examples:
        >>> size_from_type("numeric(10,2)")
        '10,2'
        >>> size_from_type("varchar(255)")
        '255'
        >>> size_from_type("text") is None
        True
    """
    match = _SIZE_ARGUMENTS.search(raw_type)
    if match is None:
        return None
    if match.group(2) is None:
        return match.group(1)
    return f"{match.group(1)},{match.group(2)}"


def canonicalize(raw_type: str) -> str:
    """
    Reduce a raw database type to its canonical category.

    Args:
        raw_type: Type as reported by the database (e.g. "int4", "varchar(255)")

    Returns:
        Category value, or the lower-cased raw type if it is not recognized
    """
    spelling = raw_type.strip().lower()

    if spelling in TYPE_ALIASES:
        return TYPE_ALIASES[spelling].value

    base = _SIZE_SUFFIX.sub("", spelling)
    if base in TYPE_ALIASES:
        return TYPE_ALIASES[base].value

    return spelling


class TypeFallbackMapper:
    """Last-resort mapping from column type to a Faker expression."""

    def map_type(self, raw_type: str, size: int | str | None = None) -> str:
        """
        Map a raw type and size to a Faker expression.

        Args:
            raw_type: Raw database type
            size: Column size ("length" or "length,precision")

        Returns:
            Faker expression; unknown types get the default expression
        """
        if size is None:
            size = size_from_type(raw_type)

        length, precision = parse_size(size)
        category = canonicalize(raw_type)

        # A zero-scale decimal only ever holds whole numbers
        if category == TypeCategory.FLOAT.value and precision == 0:
            category = TypeCategory.INTEGER.value

        if category == TypeCategory.FLOAT.value:
            return self._float(length, precision)

        if category in (TypeCategory.INTEGER.value, "number"):
            if length is None:
                return "random_number()"
            return f"random_number(digits={length})"

        return TYPE_EXPRESSIONS.get(category, DEFAULT_EXPRESSION)

    @staticmethod
    def _float(length: int | None, precision: int) -> str:
        if length is not None and length > precision:
            return f"pyfloat(left_digits={length - precision}, right_digits={precision})"
        return f"pyfloat(right_digits={precision})"
