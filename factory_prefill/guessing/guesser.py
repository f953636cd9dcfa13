"""Faker expression guessing for a single column."""

import logging

from faker import Faker

from factory_prefill.guessing.catalog import NativeGeneratorCatalog, normalize
from factory_prefill.guessing.names import ID_SUFFIX, INTEGER, NameHeuristicMatcher
from factory_prefill.guessing.types import TypeFallbackMapper, size_from_type

logger = logging.getLogger(__name__)


class TypeGuesser:
    """
    Guess the Faker expression for a column from its name, type and size.

    Strategies are tried in order, first result wins:
        1. `*_id` columns are integers
        2. Name heuristics (exact names, `_token` suffix)
        3. Faker method with the same normalized name
        4. `*_url` columns are URLs
        5. Type fallback (always produces an expression)

    Example:
        >>> guesser = TypeGuesser(locale="en_US")
        >>> guesser.guess("email_address", "varchar", 255)
        'email()'
        >>> guesser.guess("price", "numeric", "10,2")
        'pyfloat(left_digits=8, right_digits=2)'
    """

    def __init__(
        self,
        locale: str = "en_US",
        catalog: NativeGeneratorCatalog | None = None,
    ):
        """
        Initialize guesser.

        Args:
            locale: Faker locale
            catalog: Shared catalog (built from a Faker of `locale` if omitted)
        """
        self.locale = locale
        self.catalog = catalog if catalog is not None else NativeGeneratorCatalog(Faker(locale))
        self.names = NameHeuristicMatcher(locale)
        self.types = TypeFallbackMapper()

    def guess(self, name: str, raw_type: str, size: int | str | None = None) -> str:
        """
        Guess the Faker expression for a column.

        Args:
            name: Column name
            raw_type: Raw database type
            size: Column size ("length" or "length,precision"), read from the
                raw type suffix when omitted

        Returns:
            Faker method call without receiver (e.g. "email()")
        """
        name = name.lower()
        if size is None:
            size = size_from_type(raw_type)

        if name.endswith(ID_SUFFIX):
            return INTEGER

        lookup = normalize(name)

        guess = self.names.match(name, size) or self.names.match(lookup, size)
        if guess:
            logger.debug(f"Column '{name}': name rule → {guess}")
            return guess

        native = self.catalog.resolve(lookup)
        if native:
            logger.debug(f"Column '{name}': Faker method → {native}()")
            return f"{native}()"

        guess = self.names.match_suffix(name)
        if guess:
            return guess

        return self.types.map_type(raw_type, size)
