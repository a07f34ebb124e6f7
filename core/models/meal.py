from pydantic import BaseModel


class MealSuggestion(BaseModel):
    name: str
    description: str
    ingredients_used: list[str] = []
    additional_needed: list[str] = []   # oil, water, salt …
    prep_time: str
    cook_time: str
    servings: str


class SuggestionSet(BaseModel):
    """Three meals are requested from the model; the count is not enforced."""
    meals: list[MealSuggestion]
