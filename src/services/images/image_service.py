"""Lookup of product images stored on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from configs import settings

logger = logging.getLogger("images.service")

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")


class ImageService:
    """Resolve a product id to the image file named after it."""

    def __init__(
        self,
        image_dir: str | Path | None = None,
        extensions: Sequence[str] = IMAGE_EXTENSIONS,
    ) -> None:
        self.image_dir = Path(image_dir or settings.IMAGE_DIR)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def find_by_id(self, product_id: str) -> Optional[Path]:
        """Return the image whose file stem matches ``product_id``, ignoring case."""
        if not self.image_dir.is_dir():
            logger.warning("Image directory %s does not exist", self.image_dir)
            return None

        wanted = product_id.lower()
        for path in sorted(self.image_dir.iterdir()):
            if not path.is_file() or path.suffix.lower() not in self.extensions:
                continue
            if path.stem.lower() == wanted:
                return path

        logger.info("Image not found for product ID: %s", product_id)
        return None


def get_image_service() -> ImageService:
    """FastAPI dependency to provide an ImageService instance."""
    return ImageService()
