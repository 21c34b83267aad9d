"""AI PC build suggestion endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.models.build_models import (
    BuildPartModel,
    BuildRequest,
    ChatRequest,
    ChatResponse,
)
from src.services.build_assistant.service import (
    BuildAssistantError,
    BuildAssistantService,
    build_request_message,
    get_build_assistant_service,
)

logger = logging.getLogger("build_assistant.controller")

build_router = APIRouter(prefix="/chat", tags=["Build assistant"])


def _suggest(service: BuildAssistantService, message: str) -> ChatResponse | JSONResponse:
    try:
        suggestion = service.suggest(message)
    except BuildAssistantError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )
    return ChatResponse(
        reply=suggestion.reply,
        parts={
            slot: BuildPartModel(name=part.name, price=part.price)
            for slot, part in suggestion.parts.items()
        },
        total=suggestion.total,
    )


@build_router.post("", response_model=ChatResponse)
def chat(
    data: ChatRequest,
    service: BuildAssistantService = Depends(get_build_assistant_service),
) -> ChatResponse | JSONResponse:
    """
    Generate a PC build for a free-text request.

    Args:
        data (ChatRequest): The request text, e.g. "Build a PC for gaming
        with a budget of 100000 BDT."

    Returns:
        ChatResponse with the raw reply and the parsed parts.
    """
    return _suggest(service, data.message)


@build_router.post("/build", response_model=ChatResponse)
def build(
    data: BuildRequest,
    service: BuildAssistantService = Depends(get_build_assistant_service),
) -> ChatResponse | JSONResponse:
    """Generate a PC build for a use case and budget."""
    return _suggest(service, build_request_message(data.purpose, data.budget))
