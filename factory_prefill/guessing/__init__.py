"""Faker expression guessing for columns."""

from factory_prefill.guessing.catalog import NativeGeneratorCatalog
from factory_prefill.guessing.guesser import TypeGuesser
from factory_prefill.guessing.names import NameHeuristicMatcher
from factory_prefill.guessing.types import TypeCategory, TypeFallbackMapper

__all__ = [
    "NativeGeneratorCatalog",
    "NameHeuristicMatcher",
    "TypeCategory",
    "TypeFallbackMapper",
    "TypeGuesser",
]
