"""Definitions stored in the resource database."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from shorthand.formatting.ir import Attribute


class DefinitionKind(Enum):
    """Discriminator for the definition variants."""

    ELEMENT = "element"
    SNIPPET = "snippet"
    REFERENCE = "reference"


@dataclass
class ElementDefinition:
    """Abbreviation that expands to an element with default attributes.

    Attributes:
        name: Expanded element name (e.g., "a" for the "a:link" key)
        attributes: Default attributes, in declaration order
        is_empty: Whether the element is self-closing
        key: Lookup key the definition was stored under
    """

    name: str
    attributes: list[Attribute] = field(default_factory=list)
    is_empty: bool = False
    key: str = ""

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.ELEMENT


@dataclass
class SnippetDefinition:
    """Literal template text.

    Attributes:
        data: Snippet text, may contain unescaped caret markers
        key: Lookup key the definition was stored under
    """

    data: str
    key: str = ""

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.SNIPPET


@dataclass
class ReferenceDefinition:
    """Alias pointing at another abbreviation by name.

    Attributes:
        data: Name of the abbreviation to resolve instead
        key: Lookup key the definition was stored under
    """

    data: str
    key: str = ""

    @property
    def kind(self) -> DefinitionKind:
        return DefinitionKind.REFERENCE


Definition = Union[ElementDefinition, SnippetDefinition, ReferenceDefinition]
