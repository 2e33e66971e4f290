"""Resource stores that answer abbreviation and snippet lookups."""

import json
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shorthand.formatting.ir import Attribute
from shorthand.resources.definitions import (
    Definition,
    ElementDefinition,
    ReferenceDefinition,
)

logger = logging.getLogger(__name__)


# Opening tag as written in a resource file: <name attr="value" ... />
ELEMENT_PATTERN = re.compile(
    r"^<([\w\-]+(?:\:[\w\-]+)?)((?:\s+[\w\-]+(?:\s*=\s*(?:(?:\"[^\"]*\")|(?:'[^']*')|[^>\s]+))?)*)\s*(\/?)>"
)
ATTRIBUTE_PATTERN = re.compile(r"([\w\-]+)\s*=\s*([\'\"])(.*?)\2")


class ResourceError(Exception):
    """Resource data could not be loaded."""

    pass


class ResourceStore(ABC):
    """Abstract lookup interface consumed by the element factories."""

    @abstractmethod
    def lookup_abbreviation(self, syntax: str, name: str) -> Optional[Definition]:
        """Find the abbreviation definition registered for ``name``.

        Args:
            syntax: Syntax identifier (html, xml, css, ...)
            name: Abbreviation name

        Returns:
            The matched definition, or None
        """
        ...

    @abstractmethod
    def lookup_snippet(self, syntax: str, name: str) -> Optional[str]:
        """Find the snippet text registered for ``name``.

        Args:
            syntax: Syntax identifier
            name: Snippet name

        Returns:
            Raw snippet text, or None
        """
        ...


class SyntaxResources(BaseModel):
    """Resource section of one syntax, as written in a resource file."""

    model_config = ConfigDict(extra="allow")

    abbreviations: dict[str, str] = Field(default_factory=dict)
    snippets: dict[str, str] = Field(default_factory=dict)
    extends: list[str] = Field(default_factory=list)

    @field_validator("extends", mode="before")
    @classmethod
    def split_extends(cls, value: Any) -> Any:
        """Accept the comma-separated form ("html, xml")."""
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def parse_abbreviation(key: str, value: str) -> Definition:
    """Turn a raw abbreviation value into a definition.

    Values that start with an opening tag become element definitions;
    anything else is a reference to another abbreviation.
    """
    key = key.strip()
    match = ELEMENT_PATTERN.search(value)
    if not match:
        return ReferenceDefinition(data=value.strip(), key=key)

    attributes = [
        Attribute(name=name, value=attr_value)
        for name, _quote, attr_value in ATTRIBUTE_PATTERN.findall(match.group(2))
    ]
    return ElementDefinition(
        name=match.group(1),
        attributes=attributes,
        is_empty=match.group(3) == "/",
        key=key,
    )


class DictResourceStore(ResourceStore):
    """Resource store backed by a settings mapping.

    The mapping holds one section per syntax. A section may extend other
    syntaxes; lookups check the section itself first and then every
    extended section in declaration order.
    """

    def __init__(self, resources: Mapping[str, Any]) -> None:
        """Parse and index ``resources``.

        Args:
            resources: Mapping of syntax name -> resource section

        Raises:
            ResourceError: If a section does not match the expected shape
        """
        self._sections: dict[str, SyntaxResources] = {}
        self._abbreviations: dict[str, dict[str, Definition]] = {}

        for syntax, section in resources.items():
            try:
                parsed = SyntaxResources.model_validate(section)
            except ValidationError as e:
                raise ResourceError(f"Invalid resources for '{syntax}': {e}") from e

            self._sections[syntax] = parsed
            self._abbreviations[syntax] = {
                key.strip(): parse_abbreviation(key, value)
                for key, value in parsed.abbreviations.items()
            }

        logger.debug("Loaded resources for syntaxes: %s", ", ".join(self._sections))

    @classmethod
    def from_file(cls, path: Path) -> "DictResourceStore":
        """Load a store from a JSON resource file.

        Raises:
            ResourceError: If the file is missing, unreadable or invalid
        """
        if not path.exists():
            raise ResourceError(f"Resource file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ResourceError(f"Cannot read resource file: {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ResourceError(f"Resource file is not valid UTF-8: {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ResourceError(f"Resource file is not valid JSON: {path}: {e}") from e

        if not isinstance(data, dict):
            raise ResourceError(f"Resource file must contain an object: {path}")

        logger.debug("Reading resources from %s", path)
        return cls(data)

    @property
    def syntaxes(self) -> tuple[str, ...]:
        """Return the syntaxes this store knows about."""
        return tuple(self._sections)

    def _chain(self, syntax: str) -> list[str]:
        """Syntaxes to search for ``syntax``, own section first."""
        if syntax not in self._sections:
            return []
        chain = [syntax]
        chain.extend(
            parent for parent in self._sections[syntax].extends
            if parent in self._sections
        )
        return chain

    def lookup_abbreviation(self, syntax: str, name: str) -> Optional[Definition]:
        for item in self._chain(syntax):
            if name in self._abbreviations[item]:
                return self._abbreviations[item][name]
        return None

    def lookup_snippet(self, syntax: str, name: str) -> Optional[str]:
        for item in self._chain(syntax):
            snippets = self._sections[item].snippets
            if name in snippets:
                return snippets[name]
        return None
