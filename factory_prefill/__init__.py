"""
factory-prefill - Prefilled Data Factories from Schema Introspection

Guesses a Faker expression for every column of a table (from its name, the
available Faker providers, or its type), links foreign keys to the related
tables' factories, and writes the result as factory modules.
"""

from factory_prefill.assembler import DefinitionAssembler
from factory_prefill.generator import FactoryGenerator
from factory_prefill.guessing import (
    NativeGeneratorCatalog,
    NameHeuristicMatcher,
    TypeCategory,
    TypeFallbackMapper,
    TypeGuesser,
)
from factory_prefill.models import Column, Definition, ModelInfo, Relation, RelationKind
from factory_prefill.relations import ModelResolver, RelationClassifier, RelationTarget

__version__ = "0.1.0"

__all__ = [
    "Column",
    "Definition",
    "DefinitionAssembler",
    "FactoryGenerator",
    "ModelInfo",
    "ModelResolver",
    "NameHeuristicMatcher",
    "NativeGeneratorCatalog",
    "Relation",
    "RelationClassifier",
    "RelationKind",
    "RelationTarget",
    "TypeCategory",
    "TypeFallbackMapper",
    "TypeGuesser",
    "__version__",
]
