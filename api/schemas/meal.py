from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.models import MealSuggestion, SuggestionSet, Turn


class SuggestionRequest(BaseModel):
    ingredients: list[str] | None = Field(None, examples=[["egg", "milk", "spinach"]])


class RecipeRequest(BaseModel):
    meal_name: str | None = Field(None, alias="mealName", examples=["Omelette"])
    ingredients: list[str] | None = None
    conversation_history: list[Turn] | None = Field(None, alias="conversationHistory")

    model_config = ConfigDict(populate_by_name=True)


class RecipeResponse(BaseModel):
    recipe: str
    conversation_history: list[Turn] = Field(..., alias="conversationHistory")

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "MealSuggestion",
    "SuggestionSet",
    "SuggestionRequest",
    "RecipeRequest",
    "RecipeResponse",
]
