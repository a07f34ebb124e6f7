# api/router.py
from fastapi import APIRouter

from . import chat, meals

api_router = APIRouter()

api_router.include_router(meals.router, tags=["Meals"])
api_router.include_router(chat.router, tags=["Conversation"])
