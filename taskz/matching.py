"""
TASKZ - Fuzzy Task Resolution
=============================
Finds the stored task a user meant when they name it loosely
("petting hamster" -> "pet my hamster").

Both strings are normalized the same way before comparison: runs of
whitespace collapse to a single space, the ends are trimmed and
everything is lower-cased. Distances are counted in Unicode code points
and punctuation is compared like any other character.
"""

import logging
from typing import List, Sequence

from .schema import Resolution, Task

logger = logging.getLogger(__name__)

# Minimum similarity for a match. "rap song" vs "make a cool rap song"
# scores 0.4 and must still resolve.
DEFAULT_THRESHOLD = 0.35


def normalize(text: str) -> str:
    return " ".join(text.split()).lower()


def levenshtein_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings, after normalization.

    The minimum number of single-character insertions, deletions or
    substitutions needed to turn `a` into `b`.

    >>> levenshtein_distance("kitten", "sitting")
    3
    >>> levenshtein_distance("Pet  my hamster", "pet my hamster")
    0
    """
    a, b = normalize(a), normalize(b)
    # Keep the shorter string as the row
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous_row: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current_row = [i]
        for j, cb in enumerate(b, start=1):
            current_row.append(min(
                previous_row[j] + 1,                 # deletion
                current_row[j - 1] + 1,              # insertion
                previous_row[j - 1] + (ca != cb),    # substitution
            ))
        previous_row = current_row
    return previous_row[-1]


def similarity(query: str, candidate: str) -> float:
    """Edit distance scaled by the longer string into [0, 1]; 1.0 is identical"""
    query, candidate = normalize(query), normalize(candidate)
    longest = max(len(query), len(candidate))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(query, candidate) / longest


def resolve(
    query: str,
    tasks: Sequence[Task],
    threshold: float = DEFAULT_THRESHOLD
) -> Resolution:
    """
    Pick the task whose description is most similar to `query`.

    Tasks are scored in the order given. Only a strictly higher score
    replaces the current best, so on a tie the earliest task wins. The
    best task is returned only if its score reaches `threshold`.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be between 0 and 1, got {threshold}")

    best_id = None
    best_score = 0.0
    for task in tasks:
        score = similarity(query, task.description)
        if best_id is None or score > best_score:
            best_id, best_score = task.id, score

    if best_id is None:
        logger.debug(f"No tasks to match against {query!r}")
        return Resolution.no_match()

    if best_score < threshold:
        logger.debug(f"No match for {query!r} (best {best_score:.2f} < {threshold:.2f})")
        return Resolution.no_match(best_score)

    logger.debug(f"Resolved {query!r} -> task {best_id} ({best_score:.2f})")
    return Resolution(task_id=best_id, score=best_score)
