"""Request models for the catalog endpoints."""

from pydantic import BaseModel, Field


class HomeSearchRequest(BaseModel):
    """Body of the cross-category catalog search."""

    search: str = Field(..., description="Text to look for in component names.")
