"""Clean Gemini text output and parse it where JSON is expected."""
from __future__ import annotations

import json
import re
from typing import Any

from core.errors import MalformedUpstreamOutput

_LEADING_FENCE = re.compile(r"^```(?:json)?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")


def clean(text: str) -> str:
    """Strip ```json / ``` fences and surrounding whitespace until nothing changes."""
    previous = None
    cleaned = text.strip()
    while cleaned != previous:
        previous = cleaned
        cleaned = _LEADING_FENCE.sub("", cleaned, count=1).strip()
        cleaned = _TRAILING_FENCE.sub("", cleaned, count=1).strip()
    return cleaned


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_structured(text: str) -> Any:
    cleaned = clean(text)
    try:
        return json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:  # JSONDecodeError included
        raise MalformedUpstreamOutput(str(e)) from e
