"""Read-only endpoints over the component catalog."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.catalog_models import HomeSearchRequest
from src.repositories.catalog.dependencies import get_db
from src.services.catalog.catalog_service import (
    CatalogService,
    InvalidComponentError,
    get_catalog_service,
)

logger = logging.getLogger("catalog.controller")

catalog_router = APIRouter(tags=["Catalog"])


@catalog_router.get("/api/{component}")
def list_components(
    component: str,
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Any:
    """
    List every catalog row of one component category.

    Args:
        component (str): One of cpu, mobo, ram, ssd, gpu, psu, case.

    Returns:
        The rows with an ``image`` URL added to each.
    """
    try:
        rows = catalog.list_components(db, component)
    except InvalidComponentError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid component type"},
        )
    except SQLAlchemyError as e:
        logger.error("Catalog query failed for %s: %s", component, e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )
    return jsonable_encoder(rows)


@catalog_router.post("/home/search")
def home_search(
    data: HomeSearchRequest,
    db: Session = Depends(get_db),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Any:
    """Search component names across every catalog category."""
    try:
        rows = catalog.search(db, data.search)
    except SQLAlchemyError as e:
        logger.error("Database query error: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database query failed"},
        )
    return jsonable_encoder(rows)
