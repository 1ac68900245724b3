import logging

import pytest
from classifier.categories import CATEGORIES, LOCAL_SUGGESTIONS, OTHER, WORK
from classifier.corpus import CorpusLoader, TrainingExample
from config import DEFAULT_CORPUS_DIR


class TestCorpusLoader:
    @pytest.fixture
    def corpus_dir(self, tmp_path):
        (tmp_path / "work.txt").write_text(
            "Preciso revisar o relatório\n\n   \n  A reunião foi adiada  \n",
            encoding="utf-8",
        )
        (tmp_path / "other.txt").write_text("Bom dia pessoal\n", encoding="utf-8")
        return tmp_path

    def test_loads_one_example_per_line(self, corpus_dir):
        examples = CorpusLoader(corpus_dir).load()
        assert examples == [
            TrainingExample("Preciso revisar o relatório", WORK),
            TrainingExample("A reunião foi adiada", WORK),
            TrainingExample("Bom dia pessoal", OTHER),
        ]

    def test_missing_category_is_logged_not_fatal(self, corpus_dir, caplog):
        with caplog.at_level(logging.WARNING, logger="classifier.corpus"):
            examples = CorpusLoader(corpus_dir).load()

        assert {e.category for e in examples} == {WORK, OTHER}
        assert "local_suggestions.txt" in caplog.text
        assert "general_questions.txt" in caplog.text

    def test_undecodable_file_is_skipped(self, corpus_dir, caplog):
        (corpus_dir / "local_suggestions.txt").write_bytes(b"\xff\xfe\xfa onde fica\n")
        with caplog.at_level(logging.WARNING, logger="classifier.corpus"):
            examples = CorpusLoader(corpus_dir).load()

        assert all(e.category != LOCAL_SUGGESTIONS for e in examples)
        assert "local_suggestions.txt" in caplog.text

    def test_missing_directory_returns_empty(self, tmp_path):
        assert CorpusLoader(tmp_path / "nope").load() == []

    def test_custom_category_subset(self, corpus_dir):
        examples = CorpusLoader(corpus_dir, categories=[OTHER]).load()
        assert examples == [TrainingExample("Bom dia pessoal", OTHER)]

    def test_examples_are_immutable(self):
        example = TrainingExample("Bom dia", OTHER)
        with pytest.raises(AttributeError):
            example.text = "Boa noite"

    def test_shipped_corpus_covers_every_category(self):
        examples = CorpusLoader(DEFAULT_CORPUS_DIR).load()
        assert {e.category for e in examples} == set(CATEGORIES)
        assert all(e.text == e.text.strip() and e.text for e in examples)
