from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import openai

from .colors import is_valid_hex

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = (
    "You are a helpful assistant who is a skilled expert in art and graphic design."
)

USER_PROMPT = (
    "If you had to come up with a name for a the color with the hex code {color} "
    "what would you call it? Please give your answer in just the color name, no "
    "other explanation is necessary. Try to make the color names as accurate as "
    "possible to describe the hue, but also use extra descriptive words to "
    "differentiate different shades of the same hue."
)


class ColorNamer:
    """Ask a chat-completion model for a creative name for a hex color.

    `client` only needs `chat.completions.create(model=..., messages=...)`,
    so an ``openai.OpenAI`` instance works as well as a test double.
    """

    def __init__(self, client: Any, model: str = DEFAULT_MODEL) -> None:
        self.client = client
        self.model = model

    def messages(self, color: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT.format(color=color)},
        ]

    def name(self, color: str) -> Optional[str]:
        if not is_valid_hex(color):
            return None
        try:
            completion = self.client.chat.completions.create(
                model=self.model, messages=self.messages(color)
            )
        except openai.OpenAIError as exc:
            log.warning("Naming %s failed: %s", color, exc)
            return None

        content = completion.choices[0].message.content
        name = (content or "").strip()
        return name or None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Optional["ColorNamer"]:
        """Build a namer backed by OpenAI; None when no API key is set."""
        api_key = config.get("OPENAI_API_KEY")
        if not api_key:
            log.info("OPENAI_API_KEY not set; color naming disabled")
            return None
        model = config.get("HUEVANA_MODEL") or DEFAULT_MODEL
        return cls(openai.OpenAI(api_key=api_key), model=model)


__all__ = ["ColorNamer", "DEFAULT_MODEL"]
