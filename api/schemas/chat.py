from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.models import Turn


class FollowupRequest(BaseModel):
    question: str | None = Field(None, examples=["What if I have no milk?"])
    conversation_history: list[Turn] | None = Field(None, alias="conversationHistory")

    model_config = ConfigDict(populate_by_name=True)


class FollowupResponse(BaseModel):
    response: str
    conversation_history: list[Turn] = Field(..., alias="conversationHistory")

    model_config = ConfigDict(populate_by_name=True)
