"""
Record store for one catalog, backed by a SQLAlchemy session
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Catalog

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Query surface the matching engine uses for a single catalog

    The store never commits; the caller owns the session and its transaction.
    """

    def __init__(self, db: Session, catalog: Catalog):
        self.db = db
        self.catalog = catalog
        self.model = catalog.model

    def _price_order(self):
        return (self.model.ptr.asc().nulls_last(), self.model.id.asc())

    def find_by_name_equals(self, name: str):
        """
        Case-insensitive exact name lookup

        Both sides are folded by the database so this agrees with
        `find_by_name_contains`; SQLite only folds ASCII letters.
        """
        return self.db.query(self.model).filter(
            func.lower(self.model.name) == func.lower(name)
        ).order_by(self.model.id).first()

    def find_by_name_contains(self, substring: str):
        """First record whose name contains `substring`, ignoring case"""
        return self.db.query(self.model).filter(
            self.model.name.icontains(substring, autoescape=True)
        ).order_by(self.model.id).first()

    def find_all(self) -> List[Any]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_salt_equals(self, salt: str) -> List[Any]:
        """Records sharing `salt`, cheapest first"""
        return self.db.query(self.model).filter(
            self.model.salt.isnot(None),
            self.model.salt == salt
        ).order_by(*self._price_order()).all()

    def find_by_salt_contains(self, substring: str) -> List[Any]:
        """Records whose salt contains `substring`, ignoring case, cheapest first"""
        return self.db.query(self.model).filter(
            self.model.salt.icontains(substring, autoescape=True)
        ).order_by(*self._price_order()).all()

    def get_by_name(self, name: str):
        return self.db.query(self.model).filter(self.model.name == name).first()

    def upsert(self, name: str, fields: Dict[str, Any]) -> bool:
        """
        Insert or update the record keyed by `name`

        Returns:
            True if a record with this name already existed
        """
        record: Optional[Any] = self.get_by_name(name)
        existed = record is not None

        if existed:
            for key, value in fields.items():
                setattr(record, key, value)
        else:
            record = self.model(name=name, **fields)
            self.db.add(record)

        # Flush so a later row with the same name in this batch finds this one
        self.db.flush()
        logger.debug("%s %s medicine %r", "Updated" if existed else "Created", self.catalog.value, name)
        return existed

    def count(self) -> int:
        return self.db.query(self.model).count()


def get_store(db: Session, catalog: Catalog) -> CatalogStore:
    return CatalogStore(db, catalog)
