"""
Catalog ingestion: derive salt, type and prices per row and upsert by name
"""
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from matching.classifier import detect_type
from matching.salt import extract_salt, clean_contents
from matching.tabular import CatalogRow

logger = logging.getLogger(__name__)

THOUSANDS_RE = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")

# SQLite INTEGER bounds
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


@dataclass
class IngestionSummary:
    created: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.created + self.updated

    def to_dict(self) -> Dict[str, int]:
        return {"created": self.created, "updated": self.updated, "total": self.total}


def parse_float(value: Any) -> Optional[float]:
    """Parse a price cell; blanks and non-numeric text become None"""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text:
        return None
    if "," in text:
        # Commas are only accepted as thousands separators, e.g. "1,250.50"
        if not THOUSANDS_RE.match(text):
            return None
        text = text.replace(",", "")
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    """Parse a count cell; values outside the 64-bit INTEGER range become None"""
    number = parse_float(value)
    if number is None:
        return None
    number = int(number)
    return number if INT64_MIN <= number <= INT64_MAX else None


def parse_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_record_fields(row: CatalogRow, name: str) -> Dict[str, Any]:
    """Column values for a record, derived purely from the row"""
    return {
        "salt": extract_salt(row.contents),
        "contents": clean_contents(row.contents),
        "type": detect_type(name),
        "packing": parse_text(row.packing),
        "ptr": parse_float(row.ptr),
        "mrp": parse_float(row.mrp),
        "shipper_size": parse_int(row.shipper_size),
    }


def ingest_rows(rows: Iterable[CatalogRow], store) -> IngestionSummary:
    """
    Upsert catalog rows in input order

    Later rows for the same name overwrite earlier ones. Rows without a
    product name are skipped.

    Args:
        rows: Parsed catalog rows
        store: CatalogStore of the catalog being loaded

    Returns:
        Counts of created and updated records
    """
    summary = IngestionSummary()
    skipped = 0

    for row in rows:
        name = (row.product_name or "").strip()
        if not name:
            skipped += 1
            continue

        if store.upsert(name, build_record_fields(row, name)):
            summary.updated += 1
        else:
            summary.created += 1

    logger.info(
        "Ingested %s catalog: %d created, %d updated, %d skipped",
        store.catalog.value, summary.created, summary.updated, skipped
    )
    return summary
