"""Response models for the price comparison endpoint."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductModel(BaseModel):
    """One store offer as shown in the comparison table."""

    title: str = Field(..., description="Product title, at most 80 characters.")
    price: str = Field(..., description="Formatted price, e.g. '৳ 12,500'.")
    priceNum: int = Field(..., gt=0, description="Numeric price in taka.")
    link: str = Field(..., description="Absolute URL of the product page.")
    image: Optional[str] = Field(default=None, description="Absolute thumbnail URL.")
    store: str = Field(..., description="Display name of the store.")
    storeColor: str = Field(..., description="Display color of the store.")


class SearchStatsModel(BaseModel):
    """Summary numbers over the merged offers."""

    totalProducts: int
    totalSites: int
    lowestPrice: Optional[int] = None
    highestPrice: Optional[int] = None


class SearchResponseModel(BaseModel):
    """Merged offers for a query, cheapest first."""

    query: str
    stats: SearchStatsModel
    products: List[ProductModel]


class ErrorResponseModel(BaseModel):
    """Body returned when a request fails internally."""

    error: str
    message: Optional[str] = None
