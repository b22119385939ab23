"""
Tests for ranking export.

Focus on the CSV layout and the append-only audit log.
"""

import csv
import json
from pathlib import Path

from pairwise_ranker.export import (
    CSV_HEADER,
    format_rankings_table,
    write_comparisons_jsonl,
    write_rankings_csv,
)
from pairwise_ranker.session import RankingSession


def played_session() -> RankingSession:
    session = RankingSession(["Apple", "Banana", "Cherry"])
    session.submit_comparison("Apple", "Banana", judge_id="alice")
    session.submit_comparison("Cherry", "Banana")
    return session


class TestExport:
    def test_rankings_csv_layout(self, tmp_path: Path) -> None:
        # Arrange
        session = played_session()
        path = tmp_path / "out" / "ranking.csv"

        # Act
        rows_written = write_rankings_csv(session.get_rankings(), path)

        # Assert
        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows_written == 3
        assert rows[0] == CSV_HEADER == ["Rank", "Name", "Score", "Confidence"]
        assert [row[1] for row in rows[1:]] == [r.name for r in session.get_rankings()]
        assert rows[-1][1] == "Banana"
        assert rows[-1][3] == "0.667"

    def test_audit_log_appends(self, tmp_path: Path) -> None:
        session = played_session()
        path = tmp_path / "audit.jsonl"

        write_comparisons_jsonl(session.ledger.comparisons()[:1], path)
        write_comparisons_jsonl(session.ledger.comparisons()[1:], path)

        lines = path.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        assert [(r["sequence"], r["winner"], r["loser"]) for r in records] == [
            (1, "Apple", "Banana"),
            (2, "Cherry", "Banana"),
        ]
        assert all(isinstance(r["timestamp"], float) for r in records)
        assert [r["judge_id"] for r in records] == ["alice", "unknown"]

    def test_table_lists_every_item(self) -> None:
        session = played_session()

        table = format_rankings_table(session.get_rankings())

        for column in ["Rank", "Name", "Score", "Confidence", "Comparisons", "Wins"]:
            assert column in table
        for name in ["Apple", "Banana", "Cherry"]:
            assert name in table
