# core/errors.py
"""Domain error kinds raised below the HTTP layer."""
from __future__ import annotations


class PantryChefError(Exception):
    """Base class for every error the request handlers translate."""


class InvalidInput(PantryChefError):
    """A required request field is missing or empty."""


class UpstreamError(PantryChefError):
    """The generation provider failed (transport or API error)."""


class MalformedUpstreamOutput(PantryChefError):
    """Provider text could not be parsed where JSON was required."""
