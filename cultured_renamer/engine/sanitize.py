"""Replace characters that are invalid in file system paths."""
from __future__ import annotations

import re


# Each invalid character maps to a look-alike that is legal on Windows
INVALID_PATH_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("*", "\u2605"),    # ★
    ("|", "\u00A6"),    # ¦
    ("\\", "\u29F9"),   # ⧹
    ("/", "\u2044"),    # ⁄
    (":", "\u0589"),    # ։
    ('"', "\u2033"),    # ″
    (">", "\u203A"),    # ›
    ("<", "\u2039"),    # ‹
    ("?", "\uFF1F"),    # ？
    ("...", "\u2026"),  # …
)

ONE_DOT_LEADER = "\u2024"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")


def replace_invalid_path_characters(text: str) -> str:
    """Make a string safe to use as a single path segment.

    Idempotent: the output contains nothing the function would change again.
    """
    result = _CONTROL_CHARS.sub("", text)
    for invalid, replacement in INVALID_PATH_REPLACEMENTS:
        result = result.replace(invalid, replacement)
    result = result.strip()

    # Edge dots become one dot leaders, as the host renamer does
    if result.startswith("."):
        result = ONE_DOT_LEADER + result[1:]
    if result.endswith("."):
        result = result[:-1] + ONE_DOT_LEADER
    return result
