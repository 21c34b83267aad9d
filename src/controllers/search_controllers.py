"""Price comparison endpoint backed by the store scrapers."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.models.search_models import ErrorResponseModel, SearchResponseModel
from src.services.price_search.service import (
    PriceSearchService,
    get_price_search_service,
)

logger = logging.getLogger("price_search.controller")

search_router = APIRouter(prefix="/search", tags=["Search"])


@search_router.get(
    "/{query}",
    response_model=SearchResponseModel,
    responses={
        200: {"model": SearchResponseModel, "description": "Merged offers"},
        500: {"model": ErrorResponseModel, "description": "Internal failure"},
    },
)
def search_prices(
    query: str,
    service: PriceSearchService = Depends(get_price_search_service),
) -> SearchResponseModel | JSONResponse:
    """
    Compare prices for a free-text query across every configured store.

    Stores that fail or time out simply contribute no offers.

    Args:
        query (str): Search text taken from the path segment.

    Returns:
        SearchResponseModel with offers sorted by ascending price.
    """
    try:
        result = service.search(query)
        return SearchResponseModel.model_validate(result.as_dict())
    except Exception as e:
        logger.exception("Search endpoint error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch search results", "message": str(e)},
        )
