"""Tests for catalog value objects."""

from __future__ import annotations

import dataclasses

import pytest

from vidresolve.domain.entities import CatalogEntry, SessionArtifacts


class TestCatalogEntry:
    def test_to_dict_keys(self, catalog_entry: CatalogEntry) -> None:
        assert catalog_entry.to_dict() == {
            "id": "1001",
            "code": "ABC-001",
            "title": "First Video",
            "thumbnail": "https://img.test/1001.jpg",
            "duration": "12:34",
            "quality": "HD",
        }

    def test_frozen(self, catalog_entry: CatalogEntry) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            catalog_entry.title = "changed"  # type: ignore[misc]


class TestSessionArtifacts:
    def test_frozen(self) -> None:
        artifacts = SessionArtifacts(csrf_token="t", cookie_header="a=1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            artifacts.csrf_token = "other"  # type: ignore[misc]
