import pytest
from classifier.categories import GENERAL_QUESTIONS, LOCAL_SUGGESTIONS, WORK, CATEGORIES
from classifier.hybrid import HybridClassifier, NotTrainedError
from classifier.router import PLACE_REQUEST_RULE, WORK_KEYWORD_RULE, match_override, route_message


class TestMatchOverride:
    def test_work_keyword(self):
        assert match_override("Tenho reunião às 14h") == (WORK, WORK_KEYWORD_RULE)

    def test_place_with_request(self):
        assert match_override("Alguém indica um museu legal?") == (LOCAL_SUGGESTIONS, PLACE_REQUEST_RULE)

    def test_place_without_request(self):
        assert match_override("O museu estava lotado") == (None, None)

    def test_no_override(self):
        assert match_override("Bom dia pessoal") == (None, None)
        assert match_override(None) == (None, None)


class TestRouteMessage:
    def test_local_request(self, trained_classifier):
        result = route_message("Onde fica um bom restaurante para almoçar?", trained_classifier)
        assert result["category"] == LOCAL_SUGGESTIONS
        assert result["rule"] == PLACE_REQUEST_RULE

    def test_work_request(self, trained_classifier):
        result = route_message("Preciso revisar um relatório urgente para o cliente.", trained_classifier)
        assert result["category"] == WORK
        assert result["rule"] == WORK_KEYWORD_RULE

    def test_work_wins_over_place(self, trained_classifier):
        text = (
            "Onde fica um bom restaurante para almoçar? "
            "Preciso também revisar um relatório urgente para o cliente."
        )
        result = route_message(text, trained_classifier)
        assert result["category"] == WORK

    def test_falls_through_to_classifier(self, trained_classifier):
        text = "Como funciona um motor de foguete?"
        result = route_message(text, trained_classifier)
        assert result["rule"] is None
        assert result["category"] == GENERAL_QUESTIONS
        assert result["confidence"] == trained_classifier.classify(text)["confidence"]

    def test_includes_scores_for_every_category(self, trained_classifier):
        result = route_message("Bom dia", trained_classifier)
        assert list(result["scores"]) == list(CATEGORIES)
        assert 0 <= result["confidence"] <= 100

    def test_untrained_classifier_raises(self):
        with pytest.raises(NotTrainedError):
            route_message("Onde fica o shopping?", HybridClassifier())
