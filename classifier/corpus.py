"""Training corpus loading from per-category sentence files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from .categories import CATEGORIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingExample:
    text: str
    category: str


class CorpusLoader:
    """Reads labeled sentences from `<corpus_dir>/<category>.txt` files.

    Each non-empty line of a category file is one training example for that
    category. A missing or unreadable file only drops its category.
    """

    def __init__(self, corpus_dir: Union[str, Path], categories: Iterable[str] = CATEGORIES):
        self.corpus_dir = Path(corpus_dir)
        self.categories = tuple(categories)

    def path_for(self, category: str) -> Path:
        return self.corpus_dir / f"{category}.txt"

    def load(self) -> list[TrainingExample]:
        """Load every category file and return a flat list of examples."""
        examples: list[TrainingExample] = []

        for category in self.categories:
            path = self.path_for(category)
            try:
                with open(path, encoding="utf-8") as f:
                    sentences = [line.strip() for line in f]
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read corpus file %s: %s", path, e)
                continue

            sentences = [s for s in sentences if s]
            examples.extend(TrainingExample(text=s, category=category) for s in sentences)
            logger.info("Loaded %d sentences for category %s", len(sentences), category)

        return examples
