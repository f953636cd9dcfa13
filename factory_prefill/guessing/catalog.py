"""Index of Faker provider methods usable as direct name matches."""

import logging

from faker import Faker

logger = logging.getLogger(__name__)


def normalize(name: str) -> str:
    """Normalize a name for catalog lookups (lower-case, no underscores)."""
    return name.replace("_", "").lower()


class NativeGeneratorCatalog:
    """
    Lazily built map of normalized Faker method names to their real names.

    Construct one catalog and share it between guessers: the map is built on
    first lookup and never rebuilt afterwards.

    Example:
        >>> catalog = NativeGeneratorCatalog(Faker("en_US"))
        >>> catalog.resolve("firstname")
        'first_name'
        >>> catalog.resolve("notafakermethod") is None
        True
    """

    def __init__(self, faker: Faker | None = None):
        """
        Initialize catalog.

        Args:
            faker: Faker instance whose providers are indexed (default: en_US)
        """
        self._faker = faker if faker is not None else Faker()
        self._methods: dict[str, str] = {}

    @property
    def built(self) -> bool:
        """Whether the method map has been built."""
        return bool(self._methods)

    def resolve(self, lookup: str) -> str | None:
        """
        Resolve a column name to a Faker method name.

        Args:
            lookup: Column name, lower-cased with underscores removed

        Returns:
            Faker method name or None if no provider offers it
        """
        if not self._methods:
            self._methods = self._build()

        return self._methods.get(lookup)

    def _build(self) -> dict[str, str]:
        methods: dict[str, str] = {}

        # Later providers overwrite earlier ones with the same normalized name
        for provider in self._faker.get_providers():
            for attr in dir(provider):
                if attr.startswith("_"):
                    continue
                if not callable(getattr(provider, attr, None)):
                    continue
                methods[normalize(attr)] = attr

        logger.debug(f"Indexed {len(methods)} Faker methods")
        return methods

    def __contains__(self, lookup: str) -> bool:
        return self.resolve(lookup) is not None

    def __len__(self) -> int:
        if not self._methods:
            self._methods = self._build()
        return len(self._methods)
