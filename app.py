"""FastAPI application."""

import argparse
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from configs import settings
from src.controllers.build_controllers import build_router
from src.controllers.catalog_controllers import catalog_router
from src.controllers.image_controllers import image_router
from src.controllers.search_controllers import search_router
from src.logger_config import configure_logging, get_logger
from src.repositories.catalog.database import CatalogUnavailableError, ping
from src.services.price_search.models import ProviderRegistryError
from src.services.price_search.service import PriceSearchService

configure_logging()
logger = get_logger("app")

app = FastAPI(
    title="PC Builder API",
    root_path=settings.ROOT_PATH_BACKEND,
    description="Component catalog, store price comparison and AI build suggestions",
    version=settings.APP_VERSION,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(search_router)
app.include_router(catalog_router)
app.include_router(image_router)
app.include_router(build_router)
if Path(settings.IMAGE_DIR).is_dir():
    app.mount("/images", StaticFiles(directory=settings.IMAGE_DIR), name="images")


@app.exception_handler(ProviderRegistryError)
async def provider_registry_error_handler(
    request: Request, exc: ProviderRegistryError
) -> JSONResponse:
    logger.error("Price provider registry is invalid: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to fetch search results", "message": str(exc)},
    )


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable_handler(
    request: Request, exc: CatalogUnavailableError
) -> JSONResponse:
    logger.error("Catalog request without database: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


@app.get("/", response_description="Api healthcheck")  # type: ignore[misc]
def index() -> Dict[str, Any]:
    """Report API status, catalog connectivity and the scraped stores."""
    return {
        "status": "API Running",
        "message": "PC Builder",
        "version": settings.APP_VERSION,
        "database": "Connected" if ping() else "Disconnected",
        "activeSites": PriceSearchService().active_sites(),
    }


def main() -> None:
    import uvicorn

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="0.0.0.0", help="Application host.")
    parser.add_argument("--port", default="3000", help="Application port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    args = parser.parse_args()

    logger.info("Database: %s", "Connected" if ping() else "Disconnected")
    logger.info(
        "Scraping sites: %s",
        ", ".join(site["name"] for site in PriceSearchService().active_sites()),
    )
    uvicorn.run("app:app", host=args.host, port=int(args.port), reload=args.reload)


if __name__ == "__main__":
    main()
