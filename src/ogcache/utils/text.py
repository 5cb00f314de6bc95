"""Text normalization shared by fingerprinting and rendering."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace to one space and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()
