"""Read helpers for the component catalog tables."""

from typing import Any, Dict, List

from sqlalchemy import MetaData, Table, select
from sqlalchemy.orm import Session

# Public component key -> catalog table name.
COMPONENT_TABLES: Dict[str, str] = {
    "cpu": "cpulist",
    "mobo": "mobolist",
    "ram": "ramlist",
    "ssd": "ssdlist",
    "gpu": "gpulist",
    "psu": "psulist",
    "case": "caselist",
}


class CRUDComponents:
    """Database access for catalog rows.

    Table layouts are owned by the catalog, so columns are reflected
    instead of mapped.
    """

    def __init__(self) -> None:
        self._metadata = MetaData()

    def _table(self, db: Session, table_name: str) -> Table:
        return Table(table_name, self._metadata, autoload_with=db.get_bind())

    def list_all(self, db: Session, table_name: str) -> List[Dict[str, Any]]:
        table = self._table(db, table_name)
        rows = db.execute(select(table)).mappings().all()
        return [dict(row) for row in rows]

    def search_by_name(
        self, db: Session, table_name: str, term: str
    ) -> List[Dict[str, Any]]:
        table = self._table(db, table_name)
        statement = select(table).where(table.c.name.like(f"%{term}%"))
        rows = db.execute(statement).mappings().all()
        return [dict(row) for row in rows]
