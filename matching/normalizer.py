"""
Text normalization for name comparison
"""
import re
from typing import Optional

WHITESPACE_RE = re.compile(r"\s+")
PARENTHESES_RE = re.compile(r"[()]")

# Dosage-form spellings folded onto one abbreviation, whole words only
FORM_SYNONYMS = [
    (re.compile(r"\bTABLET\b|\bTAB\b"), "TAB"),
    (re.compile(r"\bCAPSULE\b|\bCAP\b"), "CAP"),
    (re.compile(r"\bINJECTION\b|\bINJ\b"), "INJ"),
    (re.compile(r"\bSYRUP\b|\bSYR\b"), "SYR"),
]


def normalize(text: Optional[str]) -> str:
    """
    Canonicalize a product name for fuzzy comparison

    "Crocin  (Tablet)" and "CROCIN TAB" both normalize to "CROCIN TAB".
    """
    if not text:
        return ""

    result = WHITESPACE_RE.sub(" ", str(text).upper())
    result = PARENTHESES_RE.sub("", result)
    for pattern, replacement in FORM_SYNONYMS:
        result = pattern.sub(replacement, result)
    return result.strip()
