# api/meals.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.deps import get_gateway
from api.errors import APIError
from api.schemas import (
    ErrorOut,
    RecipeRequest,
    RecipeResponse,
    SuggestionRequest,
    SuggestionSet,
)
from core.errors import MalformedUpstreamOutput, UpstreamError
from core.normalize import parse_structured
from core.prompts import recipe_prompt, suggestions_prompt
from core.transcript import append_exchange
from services.gemini import ModelGateway

_LOG = logging.getLogger(__name__)

router = APIRouter()

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorOut},
}


@router.post(
    "/get-suggestions",
    response_model=None,
    responses={status.HTTP_200_OK: {"model": SuggestionSet}, **_ERRORS},
    summary="Suggest three meals for a list of ingredients",
)
async def get_suggestions(
    body: SuggestionRequest | None = None,
    gateway: ModelGateway = Depends(get_gateway),
) -> JSONResponse:
    """
    The model's JSON is relayed as-is; only parseability is checked,
    not the number of meals or their fields.
    """
    # a missing body is treated as an empty one
    if body is None:
        body = SuggestionRequest()
    prompt = suggestions_prompt(body.ingredients)
    try:
        text = await gateway.generate(prompt)
        parsed = parse_structured(text)
    except (UpstreamError, MalformedUpstreamOutput) as e:
        _LOG.error("Error getting suggestions: %s", e)
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to get meal suggestions", str(e)
        ) from e
    return JSONResponse(content=parsed)


@router.post(
    "/get-recipe",
    response_model=RecipeResponse,
    responses=_ERRORS,
    summary="Full recipe for one meal, continuing an optional conversation",
)
async def get_recipe(
    body: RecipeRequest | None = None,
    gateway: ModelGateway = Depends(get_gateway),
) -> RecipeResponse:
    if body is None:
        body = RecipeRequest()
    prompt = recipe_prompt(body.meal_name, body.ingredients)
    history = body.conversation_history or []
    try:
        if history:
            text = await gateway.converse(history, prompt)
        else:
            text = await gateway.generate(prompt)
    except UpstreamError as e:
        _LOG.error("Error getting recipe: %s", e)
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to get recipe", str(e)
        ) from e

    return RecipeResponse(
        recipe=text,
        conversation_history=append_exchange(history, prompt, text),
    )
