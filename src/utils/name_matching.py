import csv
import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# "X HOUSE MANAGEMENT COMPANY LIMITED" and similar
HOUSE_MARKER = " HOUSE "
MANAGEMENT_MARKER = "MANAGEMENT"


def matches_any_substring(haystack: str, needles: Iterable[str]) -> bool:
    """Check if any needle occurs in haystack (case-sensitive, no patterns)."""
    return any(needle in haystack for needle in needles)


def exclude_by_name(name: str, excluded_names: Iterable[str]) -> bool:
    """True if the name contains any excluded substring.

    A match is a veto regardless of any other signal.
    """
    return matches_any_substring(name, excluded_names)


def include_by_name(name: str, included_names: Iterable[str]) -> bool:
    """True if the name looks like an RMC's.

    Either the name contains a configured substring, or it contains both
    " HOUSE " and "MANAGEMENT" anywhere.
    """
    if matches_any_substring(name, included_names):
        return True
    return HOUSE_MARKER in name and MANAGEMENT_MARKER in name


def load_wordlist(path: Path) -> tuple[str, ...]:
    """Load the first column of a headerless CSV file.

    Blank lines are ignored. Entries are used verbatim, so surrounding
    spaces in the file are significant.
    """
    with open(path, newline="", encoding="utf-8") as f:
        words = tuple(row[0] for row in csv.reader(f) if row)
    logger.info("Loaded %d names from %s", len(words), path)
    return words
