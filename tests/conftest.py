"""Pytest fixtures for Shorthand tests."""

import json
from pathlib import Path
from typing import Optional

import pytest

from shorthand.core.factories import ElementFactory
from shorthand.resources.definitions import Definition
from shorthand.resources.store import DictResourceStore, ResourceStore


class RecordingStore(ResourceStore):
    """In-memory store that remembers every lookup it answers."""

    def __init__(
        self,
        abbreviations: Optional[dict[str, Definition]] = None,
        snippets: Optional[dict[str, str]] = None,
    ) -> None:
        self.abbreviations = abbreviations or {}
        self.snippets = snippets or {}
        self.abbreviation_lookups: list[tuple[str, str]] = []
        self.snippet_lookups: list[tuple[str, str]] = []

    def lookup_abbreviation(self, syntax: str, name: str) -> Optional[Definition]:
        self.abbreviation_lookups.append((syntax, name))
        return self.abbreviations.get(name)

    def lookup_snippet(self, syntax: str, name: str) -> Optional[str]:
        self.snippet_lookups.append((syntax, name))
        return self.snippets.get(name)


@pytest.fixture
def sample_resources() -> dict:
    """Resource mapping shaped like a user resource file."""
    return {
        "html": {
            "abbreviations": {
                "a": '<a href="">',
                "a:link": '<a href="http://|">',
                "img": '<img src="" alt="" />',
                "btn": '<button class="btn" type="button">',
                "input": '<input type="text" />',
                "bq": "blockquote",
                "blockquote": "<blockquote>",
                "dl+": "dl>dt+dd",
                "broken": "missing-target",
            },
            "snippets": {
                "cc:ie6": "<!--[if lte IE 6]>\n\t${child}|\n<![endif]-->",
                "doctype": "<!DOCTYPE html>",
            },
        },
        "xsl": {
            "extends": "html",
            "abbreviations": {
                "tm": '<xsl:template match="" mode="">',
                "a": '<xsl:apply-templates select="" mode="" />',
            },
        },
    }


@pytest.fixture
def store(sample_resources: dict) -> DictResourceStore:
    """Store built from the sample resources."""
    return DictResourceStore(sample_resources)


@pytest.fixture
def factory(store: DictResourceStore) -> ElementFactory:
    """Element factory bound to the sample store."""
    return ElementFactory(store)


@pytest.fixture
def recording_store() -> RecordingStore:
    """Empty recording store, filled in by the test."""
    return RecordingStore()


@pytest.fixture
def tmp_resources_file(tmp_path: Path, sample_resources: dict) -> Path:
    """Write the sample resources to a temporary JSON file."""
    file_path = tmp_path / "resources.json"
    file_path.write_text(json.dumps(sample_resources), encoding="utf-8")
    return file_path
