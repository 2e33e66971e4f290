"""Resource definitions and lookup stores."""

from shorthand.resources.definitions import (
    Definition,
    DefinitionKind,
    ElementDefinition,
    SnippetDefinition,
    ReferenceDefinition,
)
from shorthand.resources.store import (
    DictResourceStore,
    ResourceError,
    ResourceStore,
    SyntaxResources,
)

__all__ = [
    "Definition",
    "DefinitionKind",
    "ElementDefinition",
    "SnippetDefinition",
    "ReferenceDefinition",
    "DictResourceStore",
    "ResourceError",
    "ResourceStore",
    "SyntaxResources",
]
