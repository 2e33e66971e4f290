"""Factories that resolve abbreviation nodes into elements."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Optional, Union

from shorthand.core.element import ResolvedElement
from shorthand.formatting.escaping import escape_caret, get_caret_placeholder
from shorthand.formatting.ir import AbbreviationNode
from shorthand.resources.definitions import (
    Definition,
    DefinitionKind,
    ElementDefinition,
    SnippetDefinition,
)
from shorthand.resources.store import ResourceStore

logger = logging.getLogger(__name__)


Resource = Union[Definition, str, None]


class ElementKind(Enum):
    """Kinds of element the factory can build."""

    TAG_ELEMENT = "tag-element"
    SNIPPET_ELEMENT = "snippet-element"


class ElementFactory:
    """Builds resolved elements against an injected resource store.

    Both builders take the same arguments:

    - ``node``: parsed abbreviation node
    - ``syntax``: syntax identifier used for lookups
    - ``resource``: a definition, a bare name (turned into an ad-hoc
      definition without touching the store), or None to look the node
      name up in the store
    - ``options``: options copied onto the element for later stages
    """

    def __init__(self, store: ResourceStore) -> None:
        self.store = store

    def create(
        self,
        kind: Union[ElementKind, str],
        node: AbbreviationNode,
        syntax: str,
        resource: Resource = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ResolvedElement:
        """Build an element of the given kind.

        Raises:
            ValueError: If ``kind`` is not a known element kind
        """
        try:
            kind = ElementKind(kind)
        except ValueError:
            raise ValueError(
                f"Unsupported element kind: {kind}. "
                f"Supported kinds: {', '.join(SUPPORTED_KINDS)}"
            ) from None
        return FACTORY_MAP[kind](self, node, syntax, resource, options)

    def tag_element(
        self,
        node: AbbreviationNode,
        syntax: str,
        resource: Resource = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ResolvedElement:
        """Resolve ``node`` into a tag-like element.

        Default attributes of the matched definition are added first and
        the node's own attributes second, so the node wins on every
        attribute except 'class', where its tokens are appended.
        """
        if isinstance(resource, str):
            resource = ElementDefinition(name=resource)

        if resource is None and node.name:
            resource = self.store.lookup_abbreviation(syntax, node.name)
            if resource is None:
                logger.debug("No abbreviation '%s' for syntax '%s'", node.name, syntax)

        # Aliases are followed exactly one level deep
        if resource is not None and resource.kind is DefinitionKind.REFERENCE:
            logger.debug("Following reference '%s' -> '%s'", node.name, resource.data)
            resource = self.store.lookup_abbreviation(syntax, resource.data)

        element = ResolvedElement(node, syntax, resource, options)
        if element.definition is not None:
            element.copy_attributes(element.definition)
        element.copy_attributes(node)
        return element

    def snippet_element(
        self,
        node: AbbreviationNode,
        syntax: str,
        resource: Resource = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ResolvedElement:
        """Resolve ``node`` into a snippet element.

        The snippet text lands in ``value``. Placeholder 'id' and 'class'
        attributes are added before the node's attributes, so a node 'id'
        replaces the placeholder and node classes follow it.
        """
        if isinstance(resource, str):
            resource = SnippetDefinition(data=resource)

        element = ResolvedElement(node, syntax, resource, options)

        if resource is not None:
            data = getattr(resource, "data", None)
        else:
            data = self.store.lookup_snippet(syntax, element.name)
            if data is None:
                logger.debug("No snippet '%s' for syntax '%s'", element.name, syntax)
        element.value = escape_caret(data)

        placeholder = get_caret_placeholder()
        element.add_attribute("id", placeholder)
        element.add_attribute("class", placeholder)
        element.copy_attributes(node)
        return element


FACTORY_MAP: dict[ElementKind, Callable[..., ResolvedElement]] = {
    ElementKind.TAG_ELEMENT: ElementFactory.tag_element,
    ElementKind.SNIPPET_ELEMENT: ElementFactory.snippet_element,
}

SUPPORTED_KINDS = tuple(kind.value for kind in FACTORY_MAP)
