"""Models for the AI build assistant endpoints."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Free-text build request."""

    message: str = Field(..., min_length=1, description="What the user wants built.")


class BuildRequest(BaseModel):
    """Build request described by use case and budget."""

    purpose: str = Field(
        default="gaming",
        min_length=1,
        description="Primary use, e.g. gaming, video editing, programming.",
    )
    budget: float = Field(..., gt=0, description="Budget in BDT.")


class BuildPartModel(BaseModel):
    name: str
    price: str


class ChatResponse(BaseModel):
    """Raw model reply plus the parts parsed out of it."""

    reply: str = Field(..., description="LLM's generated response.")
    parts: Dict[str, BuildPartModel] = Field(
        default_factory=dict,
        description="Builder slot (cpu, gpu, mobo, ram, ssd, psu, case) to part.",
    )
    total: Optional[str] = Field(default=None, description="Total quoted by the model.")
