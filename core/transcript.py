"""
core/transcript.py
────────────────────────────────────────────────────────────────────────
Conversation transcript helpers.

The client owns the transcript and resends it on every call; the server
only transforms it:

1.   `to_upstream_format()` – wire turns ➜ Gemini `Content` history
     (role ``assistant`` becomes ``model``).
2.   `append_exchange()` – returns a *new* list with the user turn and
     the assistant reply appended, in that order.
"""
from __future__ import annotations

from typing import Sequence

from google.genai import types

from core.models import Role, Turn

# wire role ➜ Gemini role
_UPSTREAM_ROLES: dict[Role, str] = {"user": "user", "assistant": "model"}


def upstream_role(role: Role) -> str:
    return _UPSTREAM_ROLES[role]


def to_upstream_format(transcript: Sequence[Turn] | None) -> list[types.Content]:
    return [
        types.Content(
            role=upstream_role(turn.role),
            parts=[types.Part(text=turn.content)],
        )
        for turn in transcript or ()
    ]


def append_exchange(
    transcript: Sequence[Turn] | None,
    user_text: str,
    assistant_text: str,
) -> list[Turn]:
    """`transcript` + user turn + assistant turn; the input is left untouched."""
    return [
        *(transcript or ()),
        Turn(role="user", content=user_text),
        Turn(role="assistant", content=assistant_text),
    ]
