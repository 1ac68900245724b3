import pytest

from classifier.categories import GENERAL_QUESTIONS, LOCAL_SUGGESTIONS, OTHER, WORK
from classifier.corpus import TrainingExample
from classifier.hybrid import HybridClassifier


@pytest.fixture
def chat_examples():
    """One example per category."""
    return [
        TrainingExample("preciso revisar o relatório", WORK),
        TrainingExample("onde fica um bom restaurante", LOCAL_SUGGESTIONS),
        TrainingExample("como funciona a internet", GENERAL_QUESTIONS),
        TrainingExample("vocês já foram a um show", OTHER),
    ]


@pytest.fixture
def trained_classifier(chat_examples):
    classifier = HybridClassifier()
    classifier.train(chat_examples)
    return classifier
