"""Hybrid TF-IDF + pattern rule message classifier."""

import logging
from collections import Counter
from typing import Iterable, Optional, TypedDict

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from .categories import CATEGORIES, FALLBACK_CATEGORY, GENERAL_QUESTIONS
from .corpus import TrainingExample
from .patterns import count_pattern_matches, is_direct_question
from .preprocessor import MAX_MESSAGE_LENGTH, tokenize

logger = logging.getLogger(__name__)

# Rule matches are higher precision than raw vector similarity
TFIDF_WEIGHT = 1.0
PATTERN_WEIGHT = 2.5
DIRECT_QUESTION_BONUS = 1.5


class ClassificationResult(TypedDict):
    category: str
    confidence: int


class NotTrainedError(RuntimeError):
    """Raised when a classifier is used before `train` was called."""


def _pretokenized(tokens: list[str]) -> list[str]:
    return tokens


def score_confidence(scores: dict[str, float], category: str) -> int:
    """Share of the total score held by `category`, as an integer percentage.

    Rounds half up and clamps to 0-100. Returns 0 when the total is not positive.
    """
    total = sum(scores.values())
    if total <= 0:
        return 0
    percentage = scores.get(category, 0.0) / total * 100
    return int(min(100.0, max(0.0, np.floor(percentage + 0.5))))


def pick_category(scores: dict[str, float]) -> ClassificationResult:
    """Highest scoring category, earliest in CATEGORIES on ties.

    Falls back to FALLBACK_CATEGORY when no category scores above zero.
    """
    values = np.array([scores.get(category, 0.0) for category in CATEGORIES])
    best_idx = int(np.argmax(values))

    if values[best_idx] > 0:
        category = CATEGORIES[best_idx]
    else:
        category = FALLBACK_CATEGORY

    return {
        "category": category,
        "confidence": score_confidence(scores, category),
    }


class HybridClassifier:
    """Classifies chat messages into work, local_suggestions, general_questions or other.

    Each category score combines the cosine similarity between the message's
    TF-IDF vector and the category centroid with the number of hand-authored
    rules the raw message matches. Train once, then `classify` may be called
    concurrently; `train` must not run alongside other calls.
    """

    def __init__(
        self,
        tfidf_weight: float = TFIDF_WEIGHT,
        pattern_weight: float = PATTERN_WEIGHT,
        direct_question_bonus: float = DIRECT_QUESTION_BONUS,
    ):
        self.tfidf_weight = tfidf_weight
        self.pattern_weight = pattern_weight
        self.direct_question_bonus = direct_question_bonus

        self.vocabulary: dict[str, int] = {}
        self.idf = np.zeros(0)
        self.centroids = np.zeros((len(CATEGORIES), 0))
        self.document_counts = {category: 0 for category in CATEGORIES}
        self._trained = False

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def training_size(self) -> int:
        return sum(self.document_counts.values())

    def train(self, examples: Iterable[TrainingExample]) -> None:
        """Build vocabulary, IDF table and category centroids from scratch.

        Args:
            examples: Labeled training sentences. An empty corpus is accepted;
                the resulting model sends every message to the fallback category.

        Raises:
            ValueError: If an example carries a category outside CATEGORIES
        """
        examples = list(examples)
        for example in examples:
            if example.category not in CATEGORIES:
                raise ValueError(f"Unknown category: {example.category!r}")

        documents = [tokenize(example.text) for example in examples]
        labels = np.array([CATEGORIES.index(example.category) for example in examples], dtype=int)
        document_counts = {category: 0 for category in CATEGORIES}
        for example in examples:
            document_counts[example.category] += 1

        vocabulary: dict[str, int] = {}
        idf = np.zeros(0)
        centroids = np.zeros((len(CATEGORIES), 0))

        if any(documents):
            vectorizer = CountVectorizer(analyzer=_pretokenized)
            counts = vectorizer.fit_transform(documents).toarray().astype(float)
            vocabulary = {token: int(idx) for token, idx in vectorizer.vocabulary_.items()}

            idf = self._inverse_document_frequency(counts)
            tfidf = self._term_frequency(counts) * idf

            centroids = np.zeros((len(CATEGORIES), len(vocabulary)))
            for idx in range(len(CATEGORIES)):
                rows = tfidf[labels == idx]
                if len(rows):
                    centroids[idx] = rows.mean(axis=0)
        else:
            logger.warning(
                "Training corpus has no usable text; every message will be classified as %s",
                FALLBACK_CATEGORY,
            )

        self.vocabulary = vocabulary
        self.idf = idf
        self.centroids = centroids
        self.document_counts = document_counts
        self._trained = True

        logger.info(
            "Trained on %d documents, vocabulary size %d, per category %s",
            len(examples), len(vocabulary), document_counts,
        )

    def score(self, text: Optional[str]) -> dict[str, float]:
        """Combined score for every category, in priority order."""
        self._check_trained()
        if not self.vocabulary:
            return {category: 0.0 for category in CATEGORIES}

        if text and len(text) > MAX_MESSAGE_LENGTH:
            text = text[:MAX_MESSAGE_LENGTH]

        vector = self._vectorize(tokenize(text))
        similarities = cosine_similarity(vector.reshape(1, -1), self.centroids)[0]
        question_bonus = self.direct_question_bonus if is_direct_question(text) else 0.0

        scores = {}
        for idx, category in enumerate(CATEGORIES):
            score = similarities[idx] * self.tfidf_weight
            score += count_pattern_matches(text, category) * self.pattern_weight
            if category == GENERAL_QUESTIONS:
                score += question_bonus
            scores[category] = float(score)
        return scores

    def classify(self, text: Optional[str]) -> ClassificationResult:
        """Classify text and return category with confidence.

        Args:
            text: Raw message text

        Returns:
            Dict with 'category' (str) and 'confidence' (int 0-100)

        Raises:
            NotTrainedError: If `train` was never called
        """
        return pick_category(self.score(text))

    def _check_trained(self) -> None:
        if not self._trained:
            raise NotTrainedError("Classifier must be trained before classifying")

    def _vectorize(self, tokens: list[str]) -> np.ndarray:
        """TF-IDF vector over the trained vocabulary; unseen tokens are dropped."""
        vector = np.zeros(len(self.vocabulary))
        if not tokens:
            return vector

        counts = Counter(tokens)
        max_count = max(counts.values())
        for token, count in counts.items():
            idx = self.vocabulary.get(token)
            if idx is not None:
                vector[idx] = count / max_count * self.idf[idx]
        return vector

    @staticmethod
    def _term_frequency(counts: np.ndarray) -> np.ndarray:
        # Max-normalized per document; documents without tokens stay zero
        max_counts = counts.max(axis=1, keepdims=True)
        return np.divide(counts, max_counts, out=np.zeros_like(counts), where=max_counts > 0)

    @staticmethod
    def _inverse_document_frequency(counts: np.ndarray) -> np.ndarray:
        n_documents = counts.shape[0]
        document_frequency = (counts > 0).sum(axis=0)
        return np.log(n_documents / (1.0 + document_frequency))
