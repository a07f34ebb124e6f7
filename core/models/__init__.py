from .meal import MealSuggestion, SuggestionSet
from .turn import Role, Turn

__all__ = ["MealSuggestion", "SuggestionSet", "Role", "Turn"]
