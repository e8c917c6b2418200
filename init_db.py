"""
Initialize database tables and optionally load catalog files from disk
"""
import argparse
from pathlib import Path

from database import SessionLocal, engine, Base
from models import Catalog
from matching.ingestion import ingest_rows
from matching.store import get_store
from matching.tabular import read_catalog_rows


def load_catalog_file(db, catalog: Catalog, path: Path):
    """Parse and ingest one catalog file, committing on success"""
    rows = read_catalog_rows(path.name, path.read_bytes())
    summary = ingest_rows(rows, get_store(db, catalog))
    db.commit()
    return summary


def init_db(branded: Path = None, generic: Path = None):
    """Create tables and load the given catalog files"""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        for catalog, path in ((Catalog.BRANDED, branded), (Catalog.GENERIC, generic)):
            if path is None:
                continue
            summary = load_catalog_file(db, catalog, path)
            print(f"Loaded {catalog.value} catalog from {path}:")
            print(f"  Created: {summary.created}")
            print(f"  Updated: {summary.updated}")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--branded", type=Path, help="Branded price list (.xlsx or .csv)")
    parser.add_argument("--generic", type=Path, help="Generic price list (.xlsx or .csv)")
    args = parser.parse_args()

    print("Initializing database...")
    init_db(args.branded, args.generic)
    print("Done!")
