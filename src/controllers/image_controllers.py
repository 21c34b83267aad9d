"""Serve catalog product images."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from src.services.images.image_service import ImageService, get_image_service

image_router = APIRouter(prefix="/images", tags=["Images"])


@image_router.get("/by-id/{productid}")
def image_by_id(
    productid: str,
    images: ImageService = Depends(get_image_service),
) -> FileResponse:
    """Return the image file stored under the product id."""
    path = images.find_by_id(productid)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Image not found"
        )
    return FileResponse(path)
