"""
Edit-distance similarity scoring
"""
from rapidfuzz.distance import Levenshtein


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning `first` into `second`"""
    return Levenshtein.distance(first, second)


def similarity(first: str, second: str) -> float:
    """
    Similarity score between 0 and 1, where 1 is an exact match

    Comparison ignores case and surrounding whitespace.
    """
    a = first.lower().strip()
    b = second.lower().strip()

    if a == b:
        return 1.0

    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    return 1 - levenshtein_distance(a, b) / max_len
