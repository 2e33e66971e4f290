"""Core resolution logic for Shorthand."""

from shorthand.core.element import ResolvedElement, ElementTreeError
from shorthand.core.factories import (
    ElementFactory,
    ElementKind,
    FACTORY_MAP,
    SUPPORTED_KINDS,
)

__all__ = [
    "ResolvedElement",
    "ElementTreeError",
    "ElementFactory",
    "ElementKind",
    "FACTORY_MAP",
    "SUPPORTED_KINDS",
]
