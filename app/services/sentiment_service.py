import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from app.utils.enums import SentimentLabel

logger = logging.getLogger(__name__)

DEFAULT_SCORE_SCALE = 10


@dataclass(frozen=True)
class SentimentResult:
    score: int
    label: SentimentLabel

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "label": self.label.value}


@lru_cache(maxsize=1)
def get_analyzer() -> SentimentIntensityAnalyzer:
    """Load the VADER lexicon once per process."""
    return SentimentIntensityAnalyzer()


def label_for_score(score: int) -> SentimentLabel:
    if score > 0:
        return SentimentLabel.POSITIVE
    if score < 0:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def _to_int_score(compound: float, scale: int) -> int:
    # Round half away from zero so +0.05 and -0.05 both leave the neutral band
    scaled = compound * scale
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def classify(
    text: str,
    analyzer: Optional[SentimentIntensityAnalyzer] = None,
    scale: int = DEFAULT_SCORE_SCALE,
) -> SentimentResult:
    """
    Score feedback text with the VADER lexicon.

    Args:
        text (str): Feedback text, already length-validated by the caller.
        analyzer: Optional analyzer instance; the shared one is used by default.
        scale (int): Multiplier applied to the compound score before rounding.

    Returns:
        SentimentResult: Signed integer score and the label derived from its sign.
    """
    if not text or not text.strip():
        return SentimentResult(score=0, label=SentimentLabel.NEUTRAL)

    analyzer = analyzer or get_analyzer()
    compound = analyzer.polarity_scores(text)["compound"]
    score = _to_int_score(compound, scale)
    return SentimentResult(score=score, label=label_for_score(score))


def classify_and_attach_sentiment(text: str, scale: int = DEFAULT_SCORE_SCALE) -> SentimentResult:
    """Classify a submission right before it is persisted."""
    result = classify(text, scale=scale)
    logger.debug(f"Sentiment for '{text[:20]}...': {result.score} ({result.label.value})")
    return result
