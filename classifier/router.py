"""Message routing: keyword context overrides ahead of the hybrid classifier."""

from typing import Optional, TypedDict

from .categories import LOCAL_SUGGESTIONS, WORK
from .hybrid import HybridClassifier, pick_category, score_confidence
from .patterns import PLACE_PATTERN, SUGGESTION_REQUEST_PATTERN, WORK_OVERRIDE_PATTERN

WORK_KEYWORD_RULE = "work_keyword"
PLACE_REQUEST_RULE = "place_request"


class RouteResult(TypedDict):
    category: str
    confidence: int
    rule: Optional[str]
    scores: dict[str, float]


def match_override(text: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Return (category, rule) for a context override, or (None, None)."""
    if not text:
        return None, None
    # Work mentions win over place requests in the same message
    if WORK_OVERRIDE_PATTERN.search(text):
        return WORK, WORK_KEYWORD_RULE
    if PLACE_PATTERN.search(text) and SUGGESTION_REQUEST_PATTERN.search(text):
        return LOCAL_SUGGESTIONS, PLACE_REQUEST_RULE
    return None, None


def route_message(text: Optional[str], classifier: HybridClassifier) -> RouteResult:
    """Pick the category a message should be handled as.

    Args:
        text: Raw message text
        classifier: Trained hybrid classifier

    Returns:
        Dict with 'category', 'confidence' (int 0-100), the override 'rule'
        that decided it (None when the classifier decided) and the
        classifier's per-category 'scores'
    """
    scores = classifier.score(text)
    category, rule = match_override(text)

    if category is None:
        result = pick_category(scores)
        category, confidence = result["category"], result["confidence"]
    else:
        confidence = score_confidence(scores, category)

    return {"category": category, "confidence": confidence, "rule": rule, "scores": scores}
