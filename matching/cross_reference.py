"""
Cross-catalog lookup by shared active ingredient
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Counterpart:
    record: Any
    savings: Optional[str]


def calculate_savings(source_ptr: Optional[float], target_ptr: Optional[float]) -> Optional[str]:
    """
    Percentage saved by buying the target instead of the source

    Returns:
        A string such as "40.00%", or None when a price is missing or the
        source price is not positive
    """
    if source_ptr is None or target_ptr is None or source_ptr <= 0:
        return None
    return f"{(source_ptr - target_ptr) / source_ptr * 100:.2f}%"


def _price_key(record):
    # Missing prices sort after every real price
    return (record.ptr is None, record.ptr if record.ptr is not None else 0.0)


def cross_reference(source, other_store) -> List[Counterpart]:
    """
    Records in the other catalog with the same salt as `source`, cheapest first

    Args:
        source: Resolved record from one catalog
        other_store: CatalogStore of the opposite catalog

    Returns:
        Counterparts annotated with savings relative to the source price
    """
    if not source.salt:
        return []

    matches = sorted(other_store.find_by_salt_equals(source.salt), key=_price_key)
    logger.info("Found %d %s counterparts for salt %s", len(matches), other_store.catalog.value, source.salt)

    return [
        Counterpart(record=record, savings=calculate_savings(source.ptr, record.ptr))
        for record in matches
    ]
