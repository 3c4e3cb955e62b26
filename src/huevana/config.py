from __future__ import annotations

import os

from .colors import DEFAULT_COLOR, is_valid_hex


def _env_color(name: str) -> str:
    value = os.environ.get(name, DEFAULT_COLOR).strip()
    return value if is_valid_hex(value) else DEFAULT_COLOR


class Config:
    DEBUG = os.environ.get("DEBUG", "").lower() in {"1", "true", "yes"}
    JSON_AS_ASCII = False
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # camera frames are small PNGs

    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")
    HUEVANA_MODEL = os.environ.get("HUEVANA_MODEL", "gpt-4o-mini")
    HUEVANA_DEFAULT_COLOR = _env_color("HUEVANA_DEFAULT_COLOR")
    HUEVANA_PALETTE_SIZE = 5
