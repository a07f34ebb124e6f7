"""Re-export individual schema modules for easy imports."""

from .chat import FollowupRequest, FollowupResponse
from .error import ErrorOut
from .meal import (
    MealSuggestion,
    RecipeRequest,
    RecipeResponse,
    SuggestionRequest,
    SuggestionSet,
)
from core.models import Turn

__all__ = [
    "ErrorOut",
    "FollowupRequest",
    "FollowupResponse",
    "MealSuggestion",
    "RecipeRequest",
    "RecipeResponse",
    "SuggestionRequest",
    "SuggestionSet",
    "Turn",
]
