"""
Tests for InformativeSelector and ShuffledSelector.

Focus on the closeness/need heuristic and deterministic tie-breaking.
"""

import itertools

import pytest

from pairwise_ranker.confidence import EvidenceConfidence
from pairwise_ranker.exceptions import ConfigurationError
from pairwise_ranker.match_selectors.informative_selector import InformativeSelector
from pairwise_ranker.match_selectors.shuffled_selector import ShuffledSelector
from pairwise_ranker.models import Item, Pair


def make_items(scores: dict[str, float], counts: dict[str, int] | None = None) -> dict[str, Item]:
    counts = counts or {}
    return {
        name: Item(name=name, score=score, comparison_count=counts.get(name, 0))
        for name, score in scores.items()
    }


def all_pairs(items: dict[str, Item]) -> list[Pair]:
    return [Pair(a, b) for a, b in itertools.combinations(sorted(items), 2)]


class TestInformativeSelector:
    """Test InformativeSelector behavior through public interface."""

    def test_ties_break_lexicographically(self) -> None:
        # Arrange
        items = make_items({"C": 1200.0, "A": 1200.0, "B": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        # Act
        match = selector.select_match(all_pairs(items), items)

        # Assert
        assert match == Pair("A", "B")

    def test_ties_break_on_joined_names(self) -> None:
        """Joined, ("a-b", "c") reads "a-b-c", which sorts before "a-z"."""
        items = make_items({"a": 1200.0, "z": 1200.0, "a-b": 1200.0, "c": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        match = selector.select_match([Pair("a", "z"), Pair("a-b", "c")], items)

        assert match == Pair("a-b", "c")

    def test_candidate_order_does_not_matter(self) -> None:
        items = make_items({"A": 1200.0, "B": 1200.0, "C": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        reversed_candidates = list(reversed(all_pairs(items)))

        assert selector.select_match(reversed_candidates, items) == Pair("A", "B")

    def test_prefers_close_ratings(self) -> None:
        """With equal evidence, the pair with the smallest rating gap wins."""
        items = make_items({"A": 1200.0, "B": 1500.0, "C": 1210.0})
        selector = InformativeSelector(EvidenceConfidence())

        assert selector.select_match(all_pairs(items), items) == Pair("A", "C")

    def test_prefers_uncertain_items(self) -> None:
        """With equal ratings, items with less evidence are asked about first."""
        items = make_items(
            {"A": 1200.0, "B": 1200.0, "C": 1200.0, "D": 1200.0},
            counts={"A": 5, "B": 5},
        )
        selector = InformativeSelector(EvidenceConfidence())

        assert selector.select_match(all_pairs(items), items) == Pair("C", "D")

    def test_informativeness_values(self) -> None:
        items = make_items({"A": 1200.0, "B": 1600.0}, counts={"A": 1, "B": 0})
        selector = InformativeSelector(EvidenceConfidence(), closeness_weight=1.0, need_weight=0.5)

        values = selector.score_pairs([Pair("A", "B")], items)

        # closeness -400/400 = -1, need (1 - 0.5) + (1 - 0) = 1.5
        assert values[0] == pytest.approx(-1.0 + 0.5 * 1.5)

    def test_select_matches_returns_item_disjoint_pairs(self) -> None:
        # Arrange
        items = make_items({"A": 1200.0, "B": 1200.0, "C": 1200.0, "D": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        # Act
        matches = selector.select_matches(all_pairs(items), items, 3)

        # Assert
        assert matches == [Pair("A", "B"), Pair("C", "D")]

    def test_select_matches_respects_limit(self) -> None:
        items = make_items({name: 1200.0 for name in "ABCDEF"})
        selector = InformativeSelector(EvidenceConfidence())

        matches = selector.select_matches(all_pairs(items), items, 2)

        assert len(matches) == 2
        names = [name for pair in matches for name in pair.key]
        assert len(names) == len(set(names))

    def test_no_candidates_signals_exhaustion(self) -> None:
        items = make_items({"A": 1200.0, "B": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        assert selector.select_match([], items) is None
        assert selector.select_matches([], items, 5) == []

    def test_selection_is_deterministic(self) -> None:
        items = make_items(
            {"A": 1190.0, "B": 1230.0, "C": 1215.0, "D": 1170.0, "E": 1200.0},
            counts={"A": 2, "B": 3, "C": 1, "D": 2, "E": 0},
        )
        selector = InformativeSelector(EvidenceConfidence())
        candidates = all_pairs(items)

        first = selector.select_matches(candidates, items, 2)
        second = selector.select_matches(candidates, items, 2)

        assert first == second

    def test_rejects_non_positive_n(self) -> None:
        items = make_items({"A": 1200.0, "B": 1200.0})
        selector = InformativeSelector(EvidenceConfidence())

        with pytest.raises(ValueError):
            selector.select_matches(all_pairs(items), items, 0)

    def test_need_weight_may_not_exceed_closeness_weight(self) -> None:
        with pytest.raises(ConfigurationError):
            InformativeSelector(EvidenceConfidence(), closeness_weight=0.5, need_weight=1.0)


class TestShuffledSelector:
    """Test the shuffled baseline selector."""

    def test_same_seed_same_order(self) -> None:
        items = make_items({name: 1200.0 for name in "ABCDE"})
        candidates = all_pairs(items)

        first = ShuffledSelector(seed=7).select_matches(candidates, items, 1)
        second = ShuffledSelector(seed=7).select_matches(candidates, items, 1)

        assert first == second

    def test_only_returns_candidates(self) -> None:
        items = make_items({name: 1200.0 for name in "ABCD"})
        candidates = [Pair("A", "C"), Pair("B", "D")]
        selector = ShuffledSelector(seed=3)

        matches = selector.select_matches(candidates, items, 4)

        assert sorted(matches) == candidates

    def test_order_is_stable_as_pairs_are_judged(self) -> None:
        # Arrange
        items = make_items({name: 1200.0 for name in "ABCD"})
        candidates = all_pairs(items)
        selector = ShuffledSelector(seed=11)
        served = []

        # Act
        while candidates:
            match = selector.select_match(candidates, items)
            assert match is not None
            served.append(match)
            candidates = [pair for pair in candidates if pair != match]

        # Assert
        assert sorted(served) == all_pairs(items)
        assert selector.select_match([], items) is None
