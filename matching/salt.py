"""
Active ingredient (salt) extraction from raw contents text
"""
import re
from typing import Any, Optional

# Spreadsheet placeholders meaning "no contents"
NOT_APPLICABLE_VALUES = {"#N/A", "N/A", "NA", ""}

DIGIT_RE = re.compile(r"\d")


def _clean(raw_contents: Any) -> Optional[str]:
    if not raw_contents:
        return None

    text = str(raw_contents).strip()
    if text in NOT_APPLICABLE_VALUES:
        return None
    return text


def extract_salt(raw_contents: Any) -> Optional[str]:
    """
    Derive the active ingredient key from a contents string

    Contents are written as "<INGREDIENT> <STRENGTH>", e.g. "PARACETAMOL 500MG",
    so every token before the first one containing a digit belongs to the
    ingredient name.

    Args:
        raw_contents: Raw cell value from the CONTENTS column

    Returns:
        Upper-cased salt, or None when nothing precedes the strength
    """
    text = _clean(raw_contents)
    if text is None:
        return None

    salt_parts = []
    for part in text.split(" "):
        if DIGIT_RE.search(part):
            break
        salt_parts.append(part)

    salt = " ".join(salt_parts).strip().upper()
    return salt or None


def clean_contents(raw_contents: Any) -> Optional[str]:
    """Trimmed contents text, or None for empty and N/A placeholders"""
    return _clean(raw_contents)
