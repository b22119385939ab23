"""
Name ingestion at the session boundary.

Turns raw pasted text or CSV cells into the clean, unique name list a
RankingSession requires.
"""

import csv
from collections.abc import Iterable
from pathlib import Path

from .exceptions import InsufficientItemsError
from .logging_config import get_logger

# Module-level logger
logger = get_logger("ingest")


def normalize_names(raw: Iterable[str]) -> list[str]:
    """
    Trim names, drop empty ones and drop later duplicates.

    Duplicates are matched case-sensitively; the first occurrence keeps its
    position.
    """
    names: list[str] = []
    seen: set[str] = set()
    dropped = 0
    for value in raw:
        name = value.strip()
        if not name:
            continue
        if name in seen:
            dropped += 1
            continue
        seen.add(name)
        names.append(name)

    if dropped:
        logger.info(f"Dropped {dropped} duplicate names")
    return names


def names_from_text(text: str) -> list[str]:
    """One name per line."""
    return normalize_names(text.splitlines())


def names_from_csv(path: Path | str) -> list[str]:
    """Every cell of every row is a name."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        cells = [cell for row in csv.reader(f) for cell in row]
    logger.debug(f"Read {len(cells)} cells from {path}")
    return normalize_names(cells)


def load_names(path: Path | str | None = None, text: str | None = None) -> list[str]:
    """
    Load names from a CSV file or from text, ready for a session.

    Raises:
        InsufficientItemsError: Fewer than two names remain after cleanup
    """
    if path is not None:
        names = names_from_csv(path)
    else:
        names = names_from_text(text or "")

    if len(names) < 2:
        raise InsufficientItemsError(f"Please provide at least 2 items to rank, got {len(names)}")

    logger.info(f"{len(names)} items loaded")
    return names
