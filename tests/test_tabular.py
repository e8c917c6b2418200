from io import BytesIO

import pandas as pd
import pytest

from matching.tabular import (
    CatalogRow,
    HeaderNotFoundError,
    UnsupportedFileError,
    extract_header_rows,
    read_catalog_rows,
    to_catalog_row,
)

PRICE_LIST_CSV = (
    "ACME PHARMA PRICE LIST,,,,,,\n"
    ",,,,,,\n"
    "PRODUCT NAME,CONTENTS,PACKING,PTR,MRP,SHIPPER SIZE,HSN CODE\n"
    "CROCIN TAB,PARACETAMOL 500MG,15 TAB,30.50,45,200,3004\n"
    ",,,,,,\n"
    "DOLO 650,#N/A,10 TAB,abc,,,3004\n"
)


def test_reads_csv_below_title_block():
    rows = read_catalog_rows("prices.csv", PRICE_LIST_CSV.encode("utf-8"))

    assert [r.product_name for r in rows] == ["CROCIN TAB", "DOLO 650"]
    assert rows[0] == CatalogRow(
        product_name="CROCIN TAB",
        contents="PARACETAMOL 500MG",
        packing="15 TAB",
        ptr="30.50",
        mrp="45",
        shipper_size="200",
    )
    assert rows[1].contents == "#N/A"
    assert rows[1].ptr == "abc"
    assert rows[1].mrp == ""


def test_reads_latin1_csv():
    content = "PRODUCT NAME,CONTENTS\nCAFÉ TAB,CAFFEINE 100MG\n".encode("latin-1")

    rows = read_catalog_rows("prices.csv", content)

    assert rows[0].product_name == "CAFÉ TAB"


def test_reads_xlsx():
    grid = pd.DataFrame([
        ["Generic price list", None, None],
        ["PRODUCT NAME", "CONTENTS", "PTR"],
        ["PARACETAMOL 500", "PARACETAMOL 500MG", 10],
    ])
    buffer = BytesIO()
    grid.to_excel(buffer, header=False, index=False, engine="openpyxl")

    rows = read_catalog_rows("generic.xlsx", buffer.getvalue())

    assert len(rows) == 1
    assert rows[0].product_name == "PARACETAMOL 500"
    assert rows[0].contents == "PARACETAMOL 500MG"
    assert float(rows[0].ptr) == 10.0


def test_header_is_matched_case_insensitively():
    grid = pd.DataFrame([[" product name ", "contents"], ["CROCIN TAB", "PARACETAMOL 500MG"]])

    mappings = extract_header_rows(grid)

    assert mappings == [{"product name": "CROCIN TAB", "contents": "PARACETAMOL 500MG"}]
    assert to_catalog_row(mappings[0]).contents == "PARACETAMOL 500MG"


def test_missing_header_raises():
    grid = pd.DataFrame([["NAME", "CONTENTS"], ["CROCIN TAB", "PARACETAMOL 500MG"]])

    with pytest.raises(HeaderNotFoundError, match="PRODUCT NAME header not found"):
        extract_header_rows(grid)


def test_unsupported_extension_raises():
    with pytest.raises(UnsupportedFileError):
        read_catalog_rows("prices.pdf", b"%PDF-1.4")


def test_unknown_columns_are_ignored():
    row = to_catalog_row({"PRODUCT NAME": " CROCIN TAB ", "HSN CODE": "3004", "Ptr": "30"})

    assert row == CatalogRow(product_name="CROCIN TAB", ptr="30")


def test_reads_csv_with_short_title_line():
    content = b"Price List July\nPRODUCT NAME,CONTENTS,PTR\nCROCIN TAB,PARACETAMOL 500MG,30\n"

    rows = read_catalog_rows("list.csv", content)

    assert rows == [CatalogRow(product_name="CROCIN TAB", contents="PARACETAMOL 500MG", ptr="30")]


def test_reads_csv_with_byte_order_mark():
    content = "PRODUCT NAME,PTR\nCROCIN TAB,30\n".encode("utf-8-sig")

    rows = read_catalog_rows("list.csv", content)

    assert rows[0].product_name == "CROCIN TAB"
