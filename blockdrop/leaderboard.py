"""High-score entries and the plain-text file that stores them."""

import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

MAX_SCORES = 5

_SCORE_RE = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class ScoreEntry:
    name: str
    score: int


def _ranked(scores):
    """Highest score first, at most MAX_SCORES entries."""
    return sorted(scores, key=lambda entry: -entry.score)[:MAX_SCORES]


def _parse_line(line):
    name, sep, rest = line.partition(":")
    if not sep:
        return None
    match = _SCORE_RE.match(rest)
    if match is None:
        return None
    score = int(match.group(1))
    if not _INT_MIN <= score <= _INT_MAX:
        return None
    return ScoreEntry(name, score)


def load_scores(path):
    """Read 'name:score' lines, skipping malformed ones; return the top entries.

    A missing or unreadable file gives an empty list.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        log.warning("Cannot open scores file %s: %s", path, exc)
        return []
    entries = (_parse_line(line) for line in lines)
    return _ranked(entry for entry in entries if entry is not None)


def save_scores(path, scores):
    """Overwrite the file with one 'name:score' line per entry."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{entry.name}:{entry.score}\n" for entry in scores)


def is_high_score(scores, score):
    """True if the score earns a place in the ranked list."""
    return len(scores) < MAX_SCORES or score > scores[-1].score


def insert_score(scores, entry):
    """Return a new ranked list with the entry added."""
    return _ranked([*scores, entry])