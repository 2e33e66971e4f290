"""Input IR and escaping helpers for abbreviation resolution."""

from shorthand.formatting.ir import (
    Attribute,
    AbbreviationNode,
    LiteralContent,
    DeferredContent,
    Content,
)
from shorthand.formatting.escaping import (
    escape_caret,
    escape_text,
    get_caret_placeholder,
    matches_tag,
    replace_unescaped_symbol,
)

__all__ = [
    "Attribute",
    "AbbreviationNode",
    "LiteralContent",
    "DeferredContent",
    "Content",
    "escape_caret",
    "escape_text",
    "get_caret_placeholder",
    "matches_tag",
    "replace_unescaped_symbol",
]
