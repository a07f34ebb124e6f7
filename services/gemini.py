# services/gemini.py
from __future__ import annotations

from typing import Protocol, Sequence

from google import genai

from config import Settings
from core.errors import UpstreamError
from core.models import Turn
from core.transcript import to_upstream_format


class ModelGateway(Protocol):
    async def generate(self, prompt: str) -> str: ...

    async def converse(self, prior_turns: Sequence[Turn] | None, message: str) -> str: ...


# ───────────── Gateway ─────────────
class GeminiGateway:
    """
    Thin adapter over the google-genai async client.

    One instance is built at start-up and shared read-only by every
    request. Each call makes exactly one outbound request; failures are
    re-raised as `UpstreamError` and never retried.
    """

    def __init__(self, client: genai.Client, model: str) -> None:
        self._client = client
        self.model = model

    async def generate(self, prompt: str) -> str:
        """Stateless completion: single prompt in, text out."""
        try:
            resp = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            raise UpstreamError(str(e)) from e
        return _text_of(resp)

    async def converse(self, prior_turns: Sequence[Turn] | None, message: str) -> str:
        """Open a chat seeded with `prior_turns` and send one message."""
        try:
            chat = self._client.aio.chats.create(
                model=self.model,
                history=to_upstream_format(prior_turns),
            )
            resp = await chat.send_message(message)
        except Exception as e:
            raise UpstreamError(str(e)) from e
        return _text_of(resp)


def _text_of(resp) -> str:
    text = resp.text
    if text is None:
        raise UpstreamError("Gemini returned no text")
    return text


# ───────────── API Key & Client ─────────────
def build_gateway(settings: Settings) -> GeminiGateway:
    if not settings.google_api_key:
        raise RuntimeError("GOOGLE_API_KEY not set in environment")
    client = genai.Client(api_key=settings.google_api_key)
    return GeminiGateway(client, settings.gemini_model)
