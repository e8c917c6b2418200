"""
Tiered name resolution: exact, then substring, then fuzzy
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from matching.normalizer import normalize
from matching.similarity import similarity

logger = logging.getLogger(__name__)

# Fuzzy candidates must score strictly above this to be accepted
FUZZY_MATCH_THRESHOLD = 0.6

EXACT = "exact"
CONTAINS = "contains"
FUZZY = "fuzzy"


@dataclass
class MatchResult:
    record: Any
    strategy: str
    score: float = 1.0


def find_best_fuzzy_match(
    records: Iterable[Any],
    query: str,
    threshold: float = FUZZY_MATCH_THRESHOLD
) -> Tuple[Optional[Any], float]:
    """
    Highest-scoring record by normalized name similarity

    A record replaces the current best only with a strictly higher score, so
    the first record seen wins a tie.

    Returns:
        (record, score), or (None, 0.0) when nobody beats the threshold
    """
    normalized_query = normalize(query)
    best_match = None
    best_score = 0.0

    for record in records:
        score = similarity(normalized_query, normalize(record.name))
        if score > best_score and score > threshold:
            best_score = score
            best_match = record

    return best_match, best_score


def resolve(store, query: str, threshold: float = FUZZY_MATCH_THRESHOLD) -> Optional[MatchResult]:
    """
    Resolve a free-text name against one catalog

    Args:
        store: CatalogStore for the catalog to search
        query: Name typed by the user
        threshold: Minimum similarity for the fuzzy tier

    Returns:
        MatchResult for the first tier that succeeds, or None on a miss
    """
    if not query or not query.strip():
        return None

    record = store.find_by_name_equals(query)
    if record is not None:
        logger.info("Exact match for %r: %s", query, record.name)
        return MatchResult(record=record, strategy=EXACT)

    record = store.find_by_name_contains(query)
    if record is not None:
        logger.info("Substring match for %r: %s", query, record.name)
        return MatchResult(record=record, strategy=CONTAINS)

    # Full catalog scan, only reached when the indexed lookups miss
    record, score = find_best_fuzzy_match(store.find_all(), query, threshold)
    if record is not None:
        logger.info("Fuzzy match for %r: %s (score %.3f)", query, record.name, score)
        return MatchResult(record=record, strategy=FUZZY, score=score)

    logger.info("No match for %r", query)
    return None
