"""Resolved element: the merged, tree-linked output of abbreviation resolution."""

import weakref
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from shorthand.formatting.escaping import escape_caret, escape_text, matches_tag
from shorthand.formatting.ir import (
    AbbreviationNode,
    Attribute,
    Content,
    DeferredContent,
    LiteralContent,
)
from shorthand.resources.definitions import Definition


# 'class' values accumulate instead of being overwritten
MERGED_ATTRIBUTE = "class"


class ElementTreeError(ValueError):
    """Invalid change to the element tree."""

    pass


class ResolvedElement:
    """Intermediate element built from an abbreviation node.

    The element combines what the user typed (the node) with what the
    resource database knows about that name (the definition). Callers link
    elements into a tree with ``add_child`` and hand the root to a
    serializer once the tree is complete.
    """

    def __init__(
        self,
        node: AbbreviationNode,
        syntax: str,
        definition: Optional[Definition] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Initialize the element.

        Args:
            node: Parsed abbreviation node
            syntax: Syntax identifier (html, xml, ...)
            definition: Matched resource definition, if any
            options: Options passed through untouched for later stages
        """
        self.definition = definition

        # Snippet definitions carry no element name of their own
        matched_name = getattr(definition, "name", None)
        self.name = matched_name if matched_name is not None else node.name
        self.real_name = node.name
        self.count = node.count or 1
        self.syntax = syntax
        self.repeat_by_lines = bool(node.is_repeating)
        self.is_repeating = self.count > 1
        self.has_implicit_name = bool(node.has_implicit_name)
        self.children: list["ResolvedElement"] = []
        self.attributes: list[Attribute] = []
        self.options: dict[str, Any] = dict(options or {})
        self.value: Optional[str] = None

        self._parent: Optional[weakref.ref] = None
        self._attr_index: dict[str, Attribute] = {}
        self._content: Optional[Content] = None
        self._paste_content = ""

        self.set_content(node.text)

    def __repr__(self) -> str:
        return (
            f"ResolvedElement(name={self.name!r}, count={self.count}, "
            f"children={len(self.children)})"
        )

    # -------------------------------------------------------------------------
    # Tree linkage
    # -------------------------------------------------------------------------

    @property
    def parent(self) -> Optional["ResolvedElement"]:
        """Return the owning element, or None for a root."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, value: Optional["ResolvedElement"]) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def add_child(self, child: "ResolvedElement") -> None:
        """Append ``child`` and point its parent back to this element.

        A child that is already attached elsewhere is moved: it is removed
        from its previous parent's children first.

        Raises:
            ElementTreeError: If ``child`` is this element or one of its ancestors
        """
        ancestor: Optional[ResolvedElement] = self
        while ancestor is not None:
            if ancestor is child:
                raise ElementTreeError(
                    f"Cannot add '{child.name}' as a descendant of itself"
                )
            ancestor = ancestor.parent

        previous = child.parent
        if previous is not None and previous is not self:
            previous.children[:] = [c for c in previous.children if c is not child]

        child.parent = self
        self.children.append(child)

    def has_children(self) -> bool:
        """Check if this element contains children."""
        return bool(self.children)

    def find_deepest_child(self) -> Optional["ResolvedElement"]:
        """Return the deepest descendant along the last-child path.

        Returns None when the element has no children.
        """
        if not self.children:
            return None

        deepest = self
        while deepest.children:
            deepest = deepest.children[-1]
        return deepest

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def add_attribute(self, name: str, value: Optional[str]) -> None:
        """Add an attribute, merging with an existing one of the same name.

        A repeated 'class' is appended to the existing value, separated by a
        space. Any other repeated attribute replaces the existing value.
        """
        value = escape_caret(value)

        existing = self._attr_index.get(name)
        if existing is None:
            attribute = Attribute(name=name, value=value)
            self._attr_index[name] = attribute
            self.attributes.append(attribute)
        elif name == MERGED_ATTRIBUTE:
            existing.value += (" " if existing.value else "") + value
        else:
            existing.value = value

    def copy_attributes(self, source: Any) -> None:
        """Add every attribute of ``source`` in order.

        ``source`` is anything with an ``attributes`` sequence: a node or
        an element definition.
        """
        attributes = getattr(source, "attributes", None) if source is not None else None
        for attribute in attributes or ():
            self.add_attribute(attribute.name, attribute.value)

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute ``name``, or None."""
        attribute = self._attr_index.get(name)
        return attribute.value if attribute is not None else None

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def set_content(
        self, data: Union[str, Callable[["ResolvedElement"], Any], Content, None]
    ) -> None:
        """Set the element content.

        Text is caret-escaped and stored as is. A callable is stored
        unchanged and invoked each time the content is read. None leaves
        the current content in place.
        """
        if data is None:
            return
        if isinstance(data, (LiteralContent, DeferredContent)):
            self._content = data
        elif isinstance(data, str):
            self._content = LiteralContent(escape_caret(data))
        elif callable(data):
            self._content = DeferredContent(data)
        else:
            raise TypeError(f"Unsupported content type: {type(data).__name__}")

    def get_content(self) -> Any:
        """Return the element content, evaluating deferred content now."""
        content = self._content
        if isinstance(content, DeferredContent):
            return content.producer(self)
        if isinstance(content, LiteralContent):
            return content.text
        return ""

    def has_tags_in_content(self) -> bool:
        """Check if the content contains markup tags.

        Used by output formatting to decide whether content is nested
        markup or plain text.
        """
        content = self.get_content()
        return isinstance(content, str) and matches_tag(content)

    def set_paste_content(self, value: Optional[str]) -> None:
        """Set text to be pasted at the caret position."""
        self._paste_content = escape_text(value)

    def get_paste_content(self) -> str:
        """Return text to be pasted at the caret position."""
        return self._paste_content

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data snapshot of this element and its subtree."""
        return {
            "name": self.name,
            "real_name": self.real_name,
            "syntax": self.syntax,
            "count": self.count,
            "is_repeating": self.is_repeating,
            "repeat_by_lines": self.repeat_by_lines,
            "has_implicit_name": self.has_implicit_name,
            "attributes": [{"name": a.name, "value": a.value} for a in self.attributes],
            "content": self.get_content(),
            "paste_content": self._paste_content,
            "value": self.value,
            "children": [child.to_dict() for child in self.children],
        }
