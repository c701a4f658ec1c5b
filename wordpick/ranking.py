"""
Edit-distance ranking for the word picker.

Every keystroke re-scores the whole word list against the query; nothing is
cached between calls and nothing is filtered out. The closest words float to
the top and words with the same distance keep their word-list order.
"""

from typing import List, Sequence, Tuple

from rapidfuzz.distance import Levenshtein


def distance(query: str, candidate: str) -> int:
    """Levenshtein distance (unit-cost insert, delete, substitute)."""
    return Levenshtein.distance(query, candidate)


def score(query: str, candidates: Sequence[str]) -> List[Tuple[str, int]]:
    """Pair every candidate with its distance to the query, in load order."""
    return [(word, distance(query, word)) for word in candidates]


def rank(query: str, candidates: Sequence[str]) -> List[str]:
    """
    Order all candidates by ascending distance to the query.

    sorted() is stable, so ties stay in the order the word list was loaded.
    """
    scored = score(query, candidates)
    scored.sort(key=lambda pair: pair[1])
    return [word for word, _ in scored]
