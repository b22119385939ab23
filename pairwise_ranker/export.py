"""
Ranking export.

Writes the ranked view as CSV, the judgments as an append-only JSONL audit
trail, and renders rankings as a text table.
"""

import csv
import json
from collections.abc import Iterable
from pathlib import Path

from prettytable import PrettyTable

from .interfaces import ComparisonRecord
from .logging_config import get_logger
from .models import Comparison, RankingEntry

# Module-level logger
logger = get_logger("export")

CSV_HEADER = ["Rank", "Name", "Score", "Confidence"]


def write_rankings_csv(rankings: Iterable[RankingEntry], path: Path | str) -> int:
    """
    Write rankings to ``path`` with the columns Rank, Name, Score, Confidence.

    Returns:
        Number of rows written, header excluded
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for entry in rankings:
            writer.writerow([entry.rank, entry.name, f"{entry.score:.2f}", f"{entry.confidence:.3f}"])
            rows += 1

    logger.info(f"Wrote {rows} rankings to {path}")
    return rows


def comparison_record(comparison: Comparison) -> ComparisonRecord:
    return {
        "sequence": comparison.sequence,
        "winner": comparison.winner,
        "loser": comparison.loser,
        "timestamp": comparison.timestamp,
        "judge_id": comparison.judge_id,
    }


def write_comparisons_jsonl(comparisons: Iterable[Comparison], path: Path | str) -> int:
    """Append comparisons to a JSONL audit log, one object per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(path, "a", encoding="utf-8") as f:
        for comparison in comparisons:
            json.dump(comparison_record(comparison), f, ensure_ascii=False)
            f.write("\n")
            count += 1

    logger.debug(f"Appended {count} comparisons to {path}")
    return count


def format_rankings_table(rankings: Iterable[RankingEntry]) -> str:
    """Render rankings as a text table."""
    table = PrettyTable()
    table.field_names = ["Rank", "Name", "Score", "Confidence", "Comparisons", "Wins"]
    table.align["Rank"] = "r"
    table.align["Name"] = "l"
    table.align["Score"] = "r"
    table.align["Confidence"] = "r"
    table.align["Comparisons"] = "r"
    table.align["Wins"] = "r"

    for entry in rankings:
        table.add_row([
            entry.rank,
            entry.name,
            f"{entry.score:.1f}",
            f"{entry.confidence:.0%}",
            entry.comparisons,
            entry.wins,
        ])
    return table.get_string()
