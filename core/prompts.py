"""
core/prompts.py
────────────────────────────────────────────────────────────────────────
Prompt templates sent to Gemini.

Three shapes:

  • suggestions  → 3 meal ideas, JSON only (see `SuggestionSet`)
  • recipe       → full conversational recipe for one meal
  • follow-up    → the user's question, passed through untouched

Every builder is a pure function; missing input raises `InvalidInput`.
"""
from __future__ import annotations

from typing import Sequence

from core.errors import InvalidInput
from core.models import Turn

SUGGESTIONS_TEMPLATE = """I have these ingredients available: {ingredients}.

Please suggest 3 different meals I can make with these ingredients. For each meal:
1. Give it a name
2. List the main ingredients needed (from my list and make sure you use the metric system for measurements)
3. Mention any common ingredients that might be needed (like oil, water, etc.)
4. Provide a brief description
5. Estimate prep and cook time
6. Indicate serving size

Format your response as JSON with this structure:
{{
  "meals": [
    {{
      "name": "Meal Name",
      "description": "Brief description",
      "ingredients_used": ["ingredient1", "ingredient2"],
      "additional_needed": ["oil", "water"],
      "prep_time": "15 mins",
      "cook_time": "30 mins",
      "servings": "4"
    }}
  ]
}}

Only return the JSON, no other text."""

RECIPE_TEMPLATE = """I want to make {meal_name}. My available ingredients are: {ingredients}.

Please provide:
1. Complete ingredient list with quantities (use metric system of measurement where appropriate)
2. Step-by-step cooking instructions
3. If I'm missing any ingredients, suggest alternatives I might have

Be conversational and helpful."""


def _join(ingredients: Sequence[str]) -> str:
    return ", ".join(ingredients)


def suggestions_prompt(ingredients: Sequence[str] | None) -> str:
    if not ingredients:
        raise InvalidInput("Ingredients are required")
    return SUGGESTIONS_TEMPLATE.format(ingredients=_join(ingredients))


def recipe_prompt(meal_name: str | None, ingredients: Sequence[str] | None) -> str:
    # an empty ingredient list is accepted, only an absent one is rejected
    if not meal_name or ingredients is None:
        raise InvalidInput("Meal name and ingredients are required")
    return RECIPE_TEMPLATE.format(meal_name=meal_name, ingredients=_join(ingredients))


def followup_prompt(question: str | None, transcript: Sequence[Turn] | None) -> str:
    """The question becomes the new user turn verbatim; no templating."""
    if not question or not transcript:
        raise InvalidInput("Question and conversation history are required")
    return question
