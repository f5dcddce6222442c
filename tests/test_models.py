"""Tests for tolerant document parsing in codeintel.models."""

from __future__ import annotations

import pytest

from codeintel.models import Conventions, FileIndex


def test_index_without_files_key_is_empty() -> None:
    assert len(FileIndex.from_dict({"version": 2})) == 0
    assert len(FileIndex.from_dict(["not", "a", "mapping"])) == 0


def test_file_records_tolerate_missing_or_bad_exports() -> None:
    index = FileIndex.from_dict(
        {"files": {"a.js": {}, "b.js": {"exports": "oops"}, "c.js": None, "d.js": {"exports": ["x", 1, None]}}}
    )

    assert [record.exports for record in index.files.values()] == [[], [], [], ["x", "1", "null"]]


def test_conventions_defaults_for_missing_document() -> None:
    conventions = Conventions.from_dict(None)

    assert conventions.export_naming.dominant is None
    assert conventions.directories == {}
    assert conventions.suffixes == {}


def test_conventions_ignore_non_mapping_sections() -> None:
    conventions = Conventions.from_dict({"naming": "camelCase", "directories": [], "suffixes": {".spec.ts": "x"}})

    assert conventions.export_naming.dominant is None
    assert conventions.directories == {}
    assert conventions.suffixes[".spec.ts"].purpose is None
    assert conventions.suffixes[".spec.ts"].count is None


def test_every_export_entry_is_counted() -> None:
    index = FileIndex.from_dict(
        {"files": {"a.js": {"exports": ["run", None, {"kind": "re-export"}, 2.0, True, "default"]}}}
    )

    assert index.files["a.js"].exports == ["run", "null", '{"kind": "re-export"}', "2", "true", "default"]


@pytest.mark.parametrize("percentage", ["87.50", "12.0", "high", 87.5, 40])
def test_percentage_is_kept_as_written(percentage: object) -> None:
    conventions = Conventions.from_dict(
        {"naming": {"exports": {"dominant": "camelCase", "percentage": percentage}}}
    )

    assert conventions.export_naming.percentage == percentage


@pytest.mark.parametrize("dominant", [0, 0.0, "", False, None])
def test_falsy_dominant_style_is_absent(dominant: object) -> None:
    conventions = Conventions.from_dict({"naming": {"exports": {"dominant": dominant, "percentage": 5}}})

    assert conventions.export_naming.dominant is None
