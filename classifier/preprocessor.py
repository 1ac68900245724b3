# classifier/preprocessor.py
"""Text normalization and tokenization for the hybrid classifier."""

import re
import unicodedata
from typing import Optional

# Cap input length to bound normalization work on oversized messages.
MAX_PREPROCESS_LENGTH = 1_000_000

# Longest raw message prefix the rule patterns and vectorizer see when scoring.
MAX_MESSAGE_LENGTH = 10_000

_WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_text(text: Optional[str]) -> str:
    """Clean and normalize text for vectorization.

    Args:
        text: Raw message text, may be None

    Returns:
        Lowercase text without diacritics or punctuation, single-spaced
    """
    if not text:
        return ""

    if len(text) > MAX_PREPROCESS_LENGTH:
        text = text[:MAX_PREPROCESS_LENGTH]

    # Lowercase
    text = text.lower()

    # Decompose accented characters and drop the combining marks
    text = unicodedata.normalize('NFD', text)
    text = "".join(c for c in text if not unicodedata.combining(c))

    # Everything that is not alphanumeric or whitespace becomes a space
    text = "".join(c if (c.isalnum() or c.isspace()) else " " for c in text)

    # Collapse multiple spaces
    text = _WHITESPACE_PATTERN.sub(' ', text)

    return text.strip()


def tokenize(text: Optional[str]) -> list[str]:
    """Normalize text and split it into tokens."""
    cleaned = normalize_text(text)
    if not cleaned:
        return []
    return cleaned.split(' ')
