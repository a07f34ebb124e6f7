# api/chat.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from api.deps import get_gateway
from api.errors import APIError
from api.schemas import ErrorOut, FollowupRequest, FollowupResponse
from core.errors import UpstreamError
from core.prompts import followup_prompt
from core.transcript import append_exchange
from services.gemini import ModelGateway

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/ask-followup",
    response_model=FollowupResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorOut},
    },
    summary="Ask a follow-up question about the current recipe conversation",
)
async def ask_followup(
    body: FollowupRequest | None = None,
    gateway: ModelGateway = Depends(get_gateway),
) -> FollowupResponse:
    # unlike /get-recipe, an empty history is rejected here
    if body is None:
        body = FollowupRequest()
    question = followup_prompt(body.question, body.conversation_history)
    history = body.conversation_history or []
    try:
        text = await gateway.converse(history, question)
    except UpstreamError as e:
        _LOG.error("Error asking follow-up: %s", e)
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to process follow-up question",
            str(e),
        ) from e

    return FollowupResponse(
        response=text,
        conversation_history=append_exchange(history, question, text),
    )
