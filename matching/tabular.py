"""
Catalog spreadsheet parsing

Supplier price lists usually carry a title block above the real header, so the
header row is located by looking for the PRODUCT NAME cell instead of assuming
it is the first line.
"""
import csv
from dataclasses import dataclass
from io import BytesIO, StringIO
from typing import Any, Dict, List, Optional

import pandas as pd

PRODUCT_NAME_HEADER = "PRODUCT NAME"

# Header text (upper-cased) -> CatalogRow field
COLUMN_MAPPING = {
    "PRODUCT NAME": "product_name",
    "CONTENTS": "contents",
    "PACKING": "packing",
    "PTR": "ptr",
    "MRP": "mrp",
    "SHIPPER SIZE": "shipper_size",
}


class CatalogFileError(Exception):
    """Uploaded catalog file cannot be turned into rows"""


class UnsupportedFileError(CatalogFileError):
    pass


class HeaderNotFoundError(CatalogFileError):
    pass


@dataclass
class CatalogRow:
    """One spreadsheet row with raw cell values for the columns ingestion uses"""
    product_name: Optional[str] = None
    contents: Any = None
    packing: Any = None
    ptr: Any = None
    mrp: Any = None
    shipper_size: Any = None


def parse_upload_file(filename: str, contents: bytes) -> pd.DataFrame:
    """Read an uploaded file into a header-less grid of cells"""
    filename = (filename or "").lower()

    if filename.endswith(".xlsx"):
        df = pd.read_excel(BytesIO(contents), header=None, dtype=object, keep_default_na=False, engine="openpyxl")
    elif filename.endswith(".csv"):
        # Title lines are often shorter than the header row, so read ragged rows
        text = None
        for encoding in ["utf-8-sig", "latin-1", "cp1252"]:
            try:
                text = contents.decode(encoding)
                break
            except (UnicodeDecodeError, UnicodeError):
                continue
        if text is None:
            raise CatalogFileError("Could not decode CSV file")
        df = pd.DataFrame(list(csv.reader(StringIO(text))), dtype=object)
    else:
        raise UnsupportedFileError(
            "Unsupported file format. Please upload Excel (.xlsx) or CSV (.csv) files."
        )

    return df.fillna("")


def _cell_text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def extract_header_rows(grid: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Turn a raw grid into dicts keyed by header text

    Raises:
        HeaderNotFoundError: if no row has a PRODUCT NAME cell
    """
    rows = grid.values.tolist()

    header_index = next(
        (
            idx for idx, row in enumerate(rows)
            if any(_cell_text(cell).upper() == PRODUCT_NAME_HEADER for cell in row)
        ),
        None
    )
    if header_index is None:
        raise HeaderNotFoundError(f"{PRODUCT_NAME_HEADER} header not found")

    header = [_cell_text(cell) for cell in rows[header_index]]
    name_column = next(idx for idx, h in enumerate(header) if h.upper() == PRODUCT_NAME_HEADER)

    parsed = []
    for row in rows[header_index + 1:]:
        if name_column >= len(row) or not _cell_text(row[name_column]):
            continue
        parsed.append({
            h: (row[idx] if idx < len(row) else "")
            for idx, h in enumerate(header)
            if h
        })

    return parsed


def to_catalog_row(mapping: Dict[str, Any]) -> CatalogRow:
    """Map a header-keyed dict onto a CatalogRow, ignoring unknown columns"""
    fields = {}
    for header, value in mapping.items():
        field = COLUMN_MAPPING.get(header.strip().upper())
        if field is not None:
            fields[field] = value

    if "product_name" in fields:
        fields["product_name"] = _cell_text(fields["product_name"]) or None

    return CatalogRow(**fields)


def read_catalog_rows(filename: str, contents: bytes) -> List[CatalogRow]:
    """Parse an uploaded catalog file into rows ready for ingestion"""
    grid = parse_upload_file(filename, contents)
    return [to_catalog_row(mapping) for mapping in extract_header_rows(grid)]
