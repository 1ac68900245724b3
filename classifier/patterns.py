"""Hand-authored lexical rules for message categories (Portuguese)."""

import re
from typing import Optional

from .categories import GENERAL_QUESTIONS, LOCAL_SUGGESTIONS, WORK

# Message opens with an interrogative word
DIRECT_QUESTION_PATTERN = re.compile(r"^\s*(qual|como|quando|onde|por que|quem)\b", re.I)

# Category cues. Each matching rule adds one to the category's pattern score.
CATEGORY_PATTERNS: dict[str, tuple[re.Pattern, ...]] = {
    WORK: (
        re.compile(r"\b(trabalho|emprego|projeto|reuni[ãa]o|cliente|apresenta[çc][ãa]o|relat[óo]rio)\b", re.I),
        re.compile(r"\b(prazo|deadline|entrega|feedback|equipe|time)\b", re.I),
        re.compile(r"\b(produtividade|gest[ãa]o|organiza[çc][ãa]o|profissional)\b", re.I),
    ),
    LOCAL_SUGGESTIONS: (
        re.compile(r"\bonde\s+(fica|[ée]|tem|encontr[ao]|acho)\b", re.I),
        re.compile(r"\b(pr[óo]ximo|perto|regi[ãa]o|local|lugar)\b", re.I),
        re.compile(r"\b(restaurante|academia|shopping|loja|caf[ée]|bar)\b", re.I),
        re.compile(r"\b(conhece[mr]?|indica[mr]?|recomenda[mr]?)\b[^\n]{0,80}\b(bom|boa|melhor)\b", re.I),
    ),
    GENERAL_QUESTIONS: (
        DIRECT_QUESTION_PATTERN,
        re.compile(r"\b(voc[êe]s|algu[ée]m)\s+(j[áa]|tem|gosta[mr]?|acha[mr]?)\b", re.I),
        re.compile(r"\b(dicas?|sugest[õo]es|opini[ãa]o|recomenda[çc][ãa]o)\b", re.I),
    ),
}

# Context overrides applied before the statistical model
WORK_OVERRIDE_PATTERN = re.compile(
    r"\b(trabalho|emprego|projeto|reuni[ãa]o|cliente|apresenta[çc][ãa]o|relat[óo]rio|prazo|deadline)\b",
    re.I,
)
PLACE_PATTERN = re.compile(
    r"\b(restaurante|caf[ée]|bar|academia|cinema|shopping|loja|parque|museu|teatro|hotel|boliche|regi[ãa]o|cidade)\b",
    re.I,
)
SUGGESTION_REQUEST_PATTERN = re.compile(
    r"\b(onde|sugere[mr]?|sugira[mr]?|sugest[ãa]o|indica[mr]?|recomenda[mr]?|conhece[mr]?)\b",
    re.I,
)


def count_pattern_matches(text: Optional[str], category: str) -> int:
    """Count how many of the category's rules match the raw text."""
    patterns = CATEGORY_PATTERNS.get(category)
    if not patterns or not text:
        return 0
    return sum(1 for pattern in patterns if pattern.search(text))


def is_direct_question(text: Optional[str]) -> bool:
    """Check if text starts with an interrogative word."""
    if not text:
        return False
    return DIRECT_QUESTION_PATTERN.search(text) is not None
