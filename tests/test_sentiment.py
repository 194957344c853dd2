import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from app.services.sentiment_service import (
    SentimentResult,
    classify,
    classify_and_attach_sentiment,
    get_analyzer,
    label_for_score,
)
from app.utils.enums import SentimentLabel


class FakeAnalyzer:
    def __init__(self, compound):
        self.compound = compound
        self.calls = 0

    def polarity_scores(self, text):
        self.calls += 1
        return {"neg": 0.0, "neu": 1.0, "pos": 0.0, "compound": self.compound}


@pytest.mark.parametrize("score,label", [
    (-5, SentimentLabel.NEGATIVE),
    (-1, SentimentLabel.NEGATIVE),
    (0, SentimentLabel.NEUTRAL),
    (1, SentimentLabel.POSITIVE),
    (5, SentimentLabel.POSITIVE),
])
def test_label_follows_sign_of_score(score, label):
    assert label_for_score(score) is label


@pytest.mark.parametrize("compound,expected", [
    (0.0, 0),
    (0.04, 0),
    (-0.04, 0),
    (0.05, 1),
    (-0.05, -1),
    (0.6249, 6),
    (-0.9, -9),
    (1.0, 10),
])
def test_compound_is_scaled_to_integer(compound, expected):
    result = classify("some text", analyzer=FakeAnalyzer(compound))
    assert result.score == expected
    assert result.label is label_for_score(expected)


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_is_neutral_without_scoring(text):
    analyzer = FakeAnalyzer(0.9)
    assert classify(text, analyzer=analyzer) == SentimentResult(0, SentimentLabel.NEUTRAL)
    assert analyzer.calls == 0


def test_real_lexicon_detects_polarity():
    good = classify("The teachers are excellent and the library is wonderful")
    bad = classify("The parking is terrible and the wifi is awful")
    assert good.label is SentimentLabel.POSITIVE and good.score > 0
    assert bad.label is SentimentLabel.NEGATIVE and bad.score < 0


def test_classification_is_deterministic():
    text = "The canteen food is bad but the staff are friendly"
    assert classify_and_attach_sentiment(text) == classify_and_attach_sentiment(text)


def test_analyzer_is_shared():
    assert get_analyzer() is get_analyzer()


def test_result_serializes_label_value():
    assert SentimentResult(-3, SentimentLabel.NEGATIVE).to_dict() == {"score": -3, "label": "negative"}
