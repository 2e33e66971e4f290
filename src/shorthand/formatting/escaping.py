"""Escaping helpers shared by resolved elements and factories.

The pipe character marks the caret position inside abbreviation text and
resource values. Before anything else touches such text, unescaped pipes are
swapped for an internal placeholder token so later stages can tell a caret
marker apart from a literal pipe written as ``\\|``.
"""

import re
from typing import Optional

from shorthand.config import get_settings


CARET_SYMBOL = "|"

# Opening, closing or self-closing tag at the end of the text
TAG_PATTERN = re.compile(
    r"<\/?[\w:\-]+(?:\s+[\w\-:]+(?:\s*=\s*(?:(?:\"[^\"]*\")|(?:'[^']*')|[^>\s]+))?)*\s*(\/?)>$"
)

# Characters with a meaning for later expansion stages (tabstops, variables)
LITERAL_SPECIALS = re.compile(r"([$\\])")


def get_caret_placeholder() -> str:
    """Return the reserved token standing in for the caret position."""
    return get_settings().caret_placeholder


def replace_unescaped_symbol(text: Optional[str], symbol: str, replacement: str) -> str:
    """Replace every unescaped occurrence of ``symbol`` in ``text``.

    A backslash escapes the symbol that follows it: the backslash is
    dropped and the symbol is kept as a literal character. For example,
    with ``|`` as the symbol, ``a|b`` becomes ``a<replacement>b`` while
    ``a\\|b`` becomes ``a|b``.

    Args:
        text: Source text (None is treated as empty)
        symbol: Symbol to replace
        replacement: Text inserted in place of each unescaped symbol

    Returns:
        The text with replacements applied
    """
    text = text or ""
    i = 0
    length = len(text)
    symbol_len = len(symbol)

    while i < length:
        if text[i] == "\\":
            # Drop the escape marker and skip over the escaped symbol
            text = text[:i] + text[i + 1 :]
            length -= 1
            i += symbol_len
        elif text[i : i + symbol_len] == symbol:
            text = text[:i] + replacement + text[i + symbol_len :]
            length = len(text)
            i += len(replacement)
        else:
            i += 1

    return text


def escape_caret(text: Optional[str]) -> str:
    """Swap unescaped pipes in ``text`` for the caret placeholder."""
    return replace_unescaped_symbol(text, CARET_SYMBOL, get_caret_placeholder())


def matches_tag(text: Optional[str]) -> bool:
    """Check whether ``text`` ends with something that looks like a tag."""
    return bool(TAG_PATTERN.search(text or ""))


def escape_text(text: Optional[str]) -> str:
    """Escape characters that later stages would treat as markup."""
    return LITERAL_SPECIALS.sub(r"\\\1", text or "")
