"""Service layer for browsing the component catalog."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from configs import settings
from src.repositories.catalog.crud.components_crud import (
    COMPONENT_TABLES,
    CRUDComponents,
)

logger = logging.getLogger("catalog.service")


class InvalidComponentError(ValueError):
    """Raised for component keys without a catalog table."""

    def __init__(self, component: str) -> None:
        super().__init__(f"Invalid component type: {component}")
        self.component = component


class CatalogService:
    """List and search catalog rows, attaching their image URLs."""

    def __init__(
        self,
        crud: Optional[CRUDComponents] = None,
        public_base_url: Optional[str] = None,
    ) -> None:
        self.crud = crud or CRUDComponents()
        self.public_base_url = (public_base_url or settings.PUBLIC_BASE_URL).rstrip("/")

    def image_url(self, item_id: Any) -> str:
        return f"{self.public_base_url}/images/by-id/{item_id}"

    def list_components(self, db: Session, component: str) -> List[Dict[str, Any]]:
        """Return every row of one component category."""
        table_name = COMPONENT_TABLES.get(component)
        if table_name is None:
            raise InvalidComponentError(component)
        return self._with_images(self.crud.list_all(db, table_name))

    def search(self, db: Session, term: str) -> List[Dict[str, Any]]:
        """Return rows of every category whose name contains ``term``."""
        results: List[Dict[str, Any]] = []
        for table_name in COMPONENT_TABLES.values():
            results.extend(
                self._with_images(self.crud.search_by_name(db, table_name, term))
            )
        logger.info("Catalog search '%s' matched %d rows", term, len(results))
        return results

    def _with_images(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [{**row, "image": self.image_url(row.get("id"))} for row in rows]


def get_catalog_service() -> CatalogService:
    """FastAPI dependency to provide a CatalogService instance."""
    return CatalogService()
