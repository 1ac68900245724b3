#!/usr/bin/env python3
"""
Chat Message Classifier - Training and Evaluation
Trains the hybrid classifier on the sentence corpus and reports how it
labels a held-out set of messages.
"""

import argparse
import logging
from pathlib import Path

from sklearn.metrics import classification_report, confusion_matrix

from classifier.categories import CATEGORIES, GENERAL_QUESTIONS, LOCAL_SUGGESTIONS, OTHER, WORK
from classifier.corpus import CorpusLoader
from classifier.hybrid import HybridClassifier
from classifier.router import route_message
from config import get_settings

HELD_OUT_MESSAGES = [
    ("Podemos analisar os resultados da pesquisa na próxima reunião?", WORK),
    ("O novo software precisa ser testado antes de ser implementado.", WORK),
    ("Precisamos discutir o desempenho da equipe no projeto anterior.", WORK),
    ("Os documentos para a auditoria já estão preparados?", WORK),
    ("Preciso preparar uma apresentação importante", WORK),
    ("Onde posso encontrar yoga ao ar livre?", LOCAL_SUGGESTIONS),
    ("Alguém indica um restaurante para um jantar romântico?", LOCAL_SUGGESTIONS),
    ("Onde está a melhor loja de brinquedos educativos?", LOCAL_SUGGESTIONS),
    ("Alguém conhece um estúdio de pilates renomado na região?", LOCAL_SUGGESTIONS),
    ("Conhece alguma academia boa na região?", LOCAL_SUGGESTIONS),
    ("Como se formam os tornados?", GENERAL_QUESTIONS),
    ("Quem foi o primeiro a chegar ao Polo Sul?", GENERAL_QUESTIONS),
    ("Por que as folhas mudam de cor no outono?", GENERAL_QUESTIONS),
    ("Qual é a fórmula molecular da água?", GENERAL_QUESTIONS),
    ("Como funciona a internet?", GENERAL_QUESTIONS),
    ("Estou tentando uma nova dieta.", OTHER),
    ("Pensando em pintar as paredes da sala.", OTHER),
    ("Estou aprendendo a tocar violão", OTHER),
    ("Que semana cansativa, só quero dormir", OTHER),
    ("Ontem vi um pôr do sol lindo", OTHER),
]


def evaluate(classifier: HybridClassifier, use_router: bool) -> None:
    """Print per-message predictions and the aggregate report."""
    y_true = []
    y_pred = []

    print("\n" + "=" * 60)
    print("ROUTER (context overrides + classifier)" if use_router else "HYBRID CLASSIFIER")
    print("=" * 60)

    for text, expected in HELD_OUT_MESSAGES:
        if use_router:
            result = route_message(text, classifier)
        else:
            result = classifier.classify(text)
        y_true.append(expected)
        y_pred.append(result["category"])
        marker = " " if result["category"] == expected else "x"
        print(f"{marker} {result['category']:18s} {result['confidence']:3d}%  {text}")

    print("\nClassification Report:")
    print(classification_report(y_true, y_pred, labels=list(CATEGORIES), zero_division=0))

    print("Confusion Matrix (rows=actual, cols=predicted):")
    cm = confusion_matrix(y_true, y_pred, labels=list(CATEGORIES))
    print(" " * 19 + " ".join(f"{c[:8]:>8s}" for c in CATEGORIES))
    for category, row in zip(CATEGORIES, cm):
        print(f"{category:18s} " + " ".join(f"{n:8d}" for n in row))


def main():
    """Train on the corpus and evaluate on the held-out messages."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--corpus-dir', type=Path, default=None,
                        help='Directory with <category>.txt files (defaults to settings)')
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    corpus_dir = args.corpus_dir or settings.corpus_dir

    examples = CorpusLoader(corpus_dir).load()
    print(f"Loaded {len(examples)} training sentences from {corpus_dir}")

    classifier = HybridClassifier()
    classifier.train(examples)
    print(f"Vocabulary size: {len(classifier.vocabulary)}")

    evaluate(classifier, use_router=False)
    evaluate(classifier, use_router=True)


if __name__ == '__main__':
    main()
