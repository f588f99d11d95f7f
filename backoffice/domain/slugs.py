"""Domain helpers for slug derivation."""
from __future__ import annotations

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str | None) -> str:
    """Lowercase ASCII slug: "Ração Seca" -> "racao-seca"."""
    norm = unicodedata.normalize("NFKD", (value or "").strip())
    ascii_text = "".join(ch for ch in norm if unicodedata.category(ch) != "Mn")
    ascii_text = ascii_text.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALNUM.sub("-", ascii_text).strip("-")
