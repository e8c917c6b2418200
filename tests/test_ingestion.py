import math

import pytest

from matching.ingestion import ingest_rows, parse_float, parse_int, IngestionSummary
from matching.store import get_store
from matching.tabular import CatalogRow
from models import Catalog, MedicineType


def crocin_row(**overrides):
    fields = dict(
        product_name="CROCIN TAB",
        contents="PARACETAMOL 500MG",
        packing="15 TAB",
        ptr="30",
        mrp="45.5",
        shipper_size="200",
    )
    fields.update(overrides)
    return CatalogRow(**fields)


def test_ingest_derives_fields(db):
    store = get_store(db, Catalog.BRANDED)

    summary = ingest_rows([crocin_row()], store)

    assert summary.to_dict() == {"created": 1, "updated": 0, "total": 1}
    record = store.get_by_name("CROCIN TAB")
    assert record.salt == "PARACETAMOL"
    assert record.contents == "PARACETAMOL 500MG"
    assert record.type == MedicineType.TABLET
    assert record.packing == "15 TAB"
    assert record.ptr == 30.0
    assert record.mrp == 45.5
    assert record.shipper_size == 200


def test_ingesting_same_row_twice_updates(db):
    store = get_store(db, Catalog.BRANDED)

    first = ingest_rows([crocin_row()], store)
    before = store.get_by_name("CROCIN TAB")
    snapshot = (before.salt, before.contents, before.type, before.ptr)

    second = ingest_rows([crocin_row()], store)
    after = store.get_by_name("CROCIN TAB")

    assert (first.created, first.updated) == (1, 0)
    assert (second.created, second.updated) == (0, 1)
    assert (after.salt, after.contents, after.type, after.ptr) == snapshot
    assert store.count() == 1


def test_last_row_wins_within_batch(db):
    store = get_store(db, Catalog.GENERIC)

    summary = ingest_rows([crocin_row(ptr="10"), crocin_row(ptr="12")], store)

    assert (summary.created, summary.updated) == (1, 1)
    assert store.get_by_name("CROCIN TAB").ptr == 12.0


def test_invalid_numbers_become_null(db):
    store = get_store(db, Catalog.GENERIC)

    summary = ingest_rows([
        crocin_row(ptr="abc", mrp="", shipper_size="12.0"),
        crocin_row(product_name="DOLO 650", ptr="12,5", shipper_size="1e20"),
    ], store)
    db.commit()

    record = store.get_by_name("CROCIN TAB")
    assert summary.created == 2
    assert record.ptr is None
    assert record.mrp is None
    assert record.shipper_size == 12
    dolo = store.get_by_name("DOLO 650")
    assert dolo.ptr is None
    assert dolo.shipper_size is None


def test_not_applicable_contents(db):
    store = get_store(db, Catalog.GENERIC)

    ingest_rows([crocin_row(contents="#N/A", packing="")], store)

    record = store.get_by_name("CROCIN TAB")
    assert record.salt is None
    assert record.contents is None
    assert record.packing is None


def test_rows_without_name_are_skipped(db):
    store = get_store(db, Catalog.GENERIC)
    rows = [CatalogRow(product_name=None), CatalogRow(product_name="   "), crocin_row()]

    summary = ingest_rows(rows, store)

    assert summary.total == 1
    assert store.count() == 1


def test_name_is_trimmed(db):
    store = get_store(db, Catalog.GENERIC)

    ingest_rows([crocin_row(product_name="  CROCIN TAB  ")], store)

    assert store.get_by_name("CROCIN TAB") is not None


def test_summary_total():
    assert IngestionSummary(created=2, updated=3).total == 5


@pytest.mark.parametrize("value, expected", [
    ("30", 30.0),
    (" 12.50 ", 12.5),
    ("1,250.50", 1250.5),
    ("1,250,000", 1250000.0),
    ("12,5", None),
    ("1,25.0", None),
    (7, 7.0),
    (0, 0.0),
    ("", None),
    (None, None),
    ("abc", None),
    (math.nan, None),
    ("inf", None),
])
def test_parse_float(value, expected):
    assert parse_float(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("24.9", 24),
    ("n/a", None),
    ("1e20", None),
    ("-1e20", None),
    ("9000000000000000000", 9000000000000000000),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected
