# petitbac/core/normalization.py
import re

# Accented Latin letters found in French words, mapped to their ASCII base letter
ACCENT_MAP = str.maketrans({
    "à": "a", "â": "a", "ä": "a",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "î": "i", "ï": "i",
    "ô": "o", "ö": "o",
    "ù": "u", "û": "u", "ü": "u",
    "ÿ": "y",
    "ç": "c",
})

_WHITESPACE_RE = re.compile(r"\s+")

def strip_accents(text: str) -> str:
    return text.translate(ACCENT_MAP)

def normalize_input(text: str | None) -> str:
    """
    Trims, lowercases, collapses internal whitespace and strips accents.
    None becomes the empty string.
    """
    if text is None:
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", text.strip().lower())
    return strip_accents(collapsed)
