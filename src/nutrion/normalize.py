"""Text normalization shared by index keys and queries."""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_DISALLOWED = re.compile(r"[^a-z0-9\s]")


def normalize(text: str) -> str:
    """Fold ``text`` into a lookup key.

    Lowercases, strips accents (NFD then drop combining marks), removes
    anything that is not an ASCII letter, digit or whitespace, and trims.
    Total and idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    folded = unicodedata.normalize("NFD", text.lower())
    folded = _COMBINING_MARKS.sub("", folded)
    return _DISALLOWED.sub("", folded).strip()
