"""Intermediate Representation shared by the parser side and the resolver.

This module defines the plain data structures that flow into the resolution
core (parsed abbreviation nodes and their attributes) together with the
content variants a resolved element can hold.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union


# =============================================================================
# Parsed abbreviation input
# =============================================================================

@dataclass
class Attribute:
    """A single name/value attribute pair.

    Attributes:
        name: Attribute name (e.g., "class")
        value: Attribute value, already stripped of quotes
    """

    name: str
    value: str = ""


@dataclass(frozen=True)
class AbbreviationNode:
    """A node of a parsed abbreviation tree.

    Instances are produced by the abbreviation parser and are never
    modified by the resolver.

    Attributes:
        name: Shorthand name as typed (e.g., "a", "btn", "html:5")
        count: How many times the element is repeated
        text: Literal text attached to the node, if any
        is_repeating: Whether the repetition spans the lines of wrapped text
        has_implicit_name: Whether the name was inferred rather than typed
        attributes: Attributes written on the node, in source order
    """

    name: str = ""
    count: int = 1
    text: Optional[str] = None
    is_repeating: bool = False
    has_implicit_name: bool = False
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)


# =============================================================================
# Element content
# =============================================================================

@dataclass(frozen=True)
class LiteralContent:
    """Content known up front, already caret-escaped."""

    text: str = ""


@dataclass(frozen=True)
class DeferredContent:
    """Content computed on every read.

    The producer receives the owning element so it can look at the final
    children and attributes at the time the content is requested.
    """

    producer: Callable[[Any], Any]


Content = Union[LiteralContent, DeferredContent]
