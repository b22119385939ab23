"""
Tests for name ingestion at the session boundary.
"""

from pathlib import Path

import pytest

from pairwise_ranker.exceptions import InsufficientItemsError
from pairwise_ranker.ingest import load_names, names_from_csv, names_from_text, normalize_names


class TestNormalizeNames:
    def test_trims_and_drops_empty(self) -> None:
        assert normalize_names(["  a ", "", "   ", "b"]) == ["a", "b"]

    def test_first_duplicate_wins(self) -> None:
        assert normalize_names(["b", "a", "b ", "c", "a"]) == ["b", "a", "c"]

    def test_duplicates_are_case_sensitive(self) -> None:
        assert normalize_names(["Apple", "apple"]) == ["Apple", "apple"]


class TestSources:
    def test_names_from_pasted_text(self) -> None:
        text = "Item 1\n\n  Item 2  \r\nItem 3\nItem 1\n"

        assert names_from_text(text) == ["Item 1", "Item 2", "Item 3"]

    def test_names_from_csv_flattens_cells(self, tmp_path: Path) -> None:
        # Arrange
        path = tmp_path / "items.csv"
        path.write_text('alpha,beta\n"gamma, delta",\n\nalpha\n', encoding="utf-8")

        # Act
        names = names_from_csv(path)

        # Assert
        assert names == ["alpha", "beta", "gamma, delta"]

    def test_load_names_requires_two_items(self) -> None:
        with pytest.raises(InsufficientItemsError):
            load_names(text="only one\n\n")
        with pytest.raises(InsufficientItemsError):
            load_names(text="same\nsame")

    def test_load_names_from_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "items.csv"
        path.write_text("x\ny\nz\n", encoding="utf-8")

        assert load_names(path=path) == ["x", "y", "z"]
