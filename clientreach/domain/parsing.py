"""
AI Output Parsing - Best-Effort Text Extraction
================================================

All string contracts with the language model live here:
- keywords: one per line
- validation: the literal token "OK" means accepted
- strategy: "Message <n>: <body>" labels

Moving to structured model output only requires replacing this module.
The parsing is purely syntactic. Prose lines around a keyword list become
keywords, and "OK." is a suggestion, not an acceptance.
"""

import re
from typing import List

from .models import ValidationVerdict

ACCEPTANCE_TOKEN = "OK"
MAX_MESSAGES = 7

_MESSAGE_SPAN = re.compile(r"Message \d:.*?(?=Message \d:|\Z)", re.DOTALL)
_MESSAGE_LABEL = re.compile(r"^Message \d:\s*")


def extract_keywords(text: str) -> List[str]:
    """
    Split AI output into trimmed, non-empty lines in original order.

    Returns an empty list when the text has no non-blank line.
    """
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def extract_messages(text: str, limit: int = MAX_MESSAGES) -> List[str]:
    """
    Extract message bodies labelled "Message <digit>:".

    Each span runs up to the next label or the end of the text.
    Returns an empty list when no label is present.
    """
    if not text:
        return []
    spans = _MESSAGE_SPAN.findall(text.strip())
    return [_MESSAGE_LABEL.sub("", span).strip() for span in spans[:limit]]


def parse_verdict(text: str) -> ValidationVerdict:
    """Exact, case-sensitive match on the trimmed response."""
    response = (text or "").strip()
    if response == ACCEPTANCE_TOKEN:
        return ValidationVerdict.accept()
    return ValidationVerdict.suggest(response)
