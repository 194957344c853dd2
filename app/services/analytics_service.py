"""Dashboard summaries computed from stored feedback records.

Every function here is a pure transformation over :class:`FeedbackRecord`
sequences. The store is read by the caller, so the same records always give
the same output and an empty collection yields zeros, empty lists or ``"N/A"``.
"""

from __future__ import annotations

import logging
import re
from collections import Counter, OrderedDict
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from app.exceptions import UnknownSectionError
from app.models.records import AuthorRecord, FeedbackRecord
from app.utils.enums import SentimentLabel, UserRole

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset({
    # articles and conjunctions
    "the", "a", "an", "and", "or", "but", "nor", "yet", "so", "if", "than", "then",
    # prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "into", "about", "as",
    # auxiliaries and modals
    "is", "are", "was", "were", "be", "been", "being", "am", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "can", "shall",
    # pronouns and determiners
    "this", "that", "these", "those", "there", "i", "you", "he", "she", "it", "we",
    "they", "me", "him", "her", "us", "them", "my", "your", "his", "its", "our", "their",
})

_NON_WORD_RE = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class AnalyticsConfig:
    """Process-wide analytics settings, built once when the app starts."""

    window_days: int = 30
    word_limit: int = 50
    min_word_length: int = 3
    stop_words: FrozenSet[str] = field(default=DEFAULT_STOP_WORDS)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "AnalyticsConfig":
        return cls(
            window_days=int(config.get("DASHBOARD_WINDOW_DAYS", cls.window_days)),
            word_limit=int(config.get("WORD_CLOUD_LIMIT", cls.word_limit)),
        )


DEFAULT_CONFIG = AnalyticsConfig()


@dataclass(frozen=True)
class KpiSummary:
    total_count: int
    recent_count: int
    overall_sentiment_percent: int
    most_common_category: str
    category_needing_attention: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def percent(count: int, total: int) -> int:
    """Whole-number percentage rounded half up; 0 for an empty total."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def _window_start(now: datetime, config: AnalyticsConfig) -> datetime:
    return now - timedelta(days=config.window_days)


def _in_window(record: FeedbackRecord, now: datetime, config: AnalyticsConfig) -> bool:
    return record.created_at >= _window_start(now, config)


def _top_category(records: Sequence[FeedbackRecord]) -> str:
    # Counter keeps insertion order, so ties go to the first category seen
    counts = Counter(r.category.value for r in records)
    if not counts:
        return NOT_AVAILABLE
    return counts.most_common(1)[0][0]


def kpi_summary(
    records: Sequence[FeedbackRecord],
    now: Optional[datetime] = None,
    config: Optional[AnalyticsConfig] = None,
) -> KpiSummary:
    now = now or datetime.utcnow()
    config = config or DEFAULT_CONFIG
    total = len(records)
    positive = sum(1 for r in records if r.sentiment_label is SentimentLabel.POSITIVE)
    negatives = [r for r in records if r.sentiment_label is SentimentLabel.NEGATIVE]

    return KpiSummary(
        total_count=total,
        recent_count=sum(1 for r in records if _in_window(r, now, config)),
        overall_sentiment_percent=percent(positive, total),
        most_common_category=_top_category(records),
        category_needing_attention=_top_category(negatives),
    )


def sentiment_breakdown(records: Sequence[FeedbackRecord]) -> Tuple[List[Dict[str, Any]], int]:
    """
    Count records per sentiment label.

    All three labels are always returned, in positive, negative, neutral order,
    so the chart keeps a fixed legend even when a label has no records.
    """
    total = len(records)
    counts = Counter(r.sentiment_label for r in records)
    breakdown = [
        {
            "label": label.value,
            "count": counts.get(label, 0),
            "percentage": percent(counts.get(label, 0), total),
        }
        for label in SentimentLabel
    ]
    return breakdown, total


def sentiment_by_category(records: Sequence[FeedbackRecord]) -> List[Dict[str, Any]]:
    grouped: "OrderedDict[str, Counter]" = OrderedDict()
    for r in records:
        grouped.setdefault(r.category.value, Counter())[r.sentiment_label.value] += 1

    return [
        {
            "category": category,
            "sentiments": [
                {"sentiment": label, "count": count}
                for label, count in counts.items()
            ],
        }
        for category, counts in grouped.items()
    ]


def submission_trends(
    records: Sequence[FeedbackRecord],
    now: Optional[datetime] = None,
    config: Optional[AnalyticsConfig] = None,
) -> List[Dict[str, Any]]:
    now = now or datetime.utcnow()
    config = config or DEFAULT_CONFIG
    per_day = Counter(r.created_at.date() for r in records if _in_window(r, now, config))

    return [
        {
            "date": day.isoformat(),
            "year": day.year,
            "month": day.month,
            "day": day.day,
            "count": per_day[day],
        }
        for day in sorted(per_day)
    ]


def tokenize(text: str, config: Optional[AnalyticsConfig] = None) -> List[str]:
    config = config or DEFAULT_CONFIG
    words = _NON_WORD_RE.sub("", text.lower()).split()
    return [
        w for w in words
        if len(w) >= config.min_word_length and w not in config.stop_words
    ]


def word_cloud(
    records: Sequence[FeedbackRecord],
    config: Optional[AnalyticsConfig] = None,
) -> List[Dict[str, Any]]:
    config = config or DEFAULT_CONFIG
    frequencies: Counter = Counter()
    for r in records:
        if r.sentiment_label is SentimentLabel.NEGATIVE:
            frequencies.update(tokenize(r.text, config))

    return [
        {"word": word, "frequency": count}
        for word, count in frequencies.most_common(config.word_limit)
    ]


def attendance_correlation(
    records: Sequence[FeedbackRecord],
    authors: Mapping[int, AuthorRecord],
) -> List[Dict[str, Any]]:
    """One point per feedback whose author is a known student."""
    points = []
    for r in records:
        author = authors.get(r.author_id)
        if author is None or author.role is not UserRole.STUDENT:
            continue
        points.append({
            "attendance_percentage": author.attendance_percentage,
            "sentiment_score": r.sentiment_score,
            "author_name": author.username,
        })
    return points


def _kpis_payload(records, authors, now, config):
    return kpi_summary(records, now, config).to_dict()


def _breakdown_payload(records, authors, now, config):
    breakdown, total = sentiment_breakdown(records)
    return {"breakdown": breakdown, "total": total}


def _by_category_payload(records, authors, now, config):
    return {"sentiment_by_category": sentiment_by_category(records)}


def _trends_payload(records, authors, now, config):
    return {"trends": submission_trends(records, now, config)}


def _word_cloud_payload(records, authors, now, config):
    return {"word_cloud": word_cloud(records, config)}


def _correlation_payload(records, authors, now, config):
    return {"correlation_data": attendance_correlation(records, authors or {})}


SECTIONS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "kpis": _kpis_payload,
    "sentiment-breakdown": _breakdown_payload,
    "sentiment-by-category": _by_category_payload,
    "submission-trends": _trends_payload,
    "word-cloud": _word_cloud_payload,
    "attendance-correlation": _correlation_payload,
}

# Only the correlation joins against users
SECTIONS_NEEDING_AUTHORS = frozenset({"attendance-correlation"})


def compute_dashboard(
    section: str,
    records: Sequence[FeedbackRecord],
    authors: Optional[Mapping[int, AuthorRecord]] = None,
    now: Optional[datetime] = None,
    config: Optional[AnalyticsConfig] = None,
) -> Dict[str, Any]:
    """Build the JSON payload for one dashboard section."""
    try:
        builder = SECTIONS[section]
    except KeyError:
        raise UnknownSectionError(section) from None

    now = now or datetime.utcnow()
    config = config or DEFAULT_CONFIG
    payload = builder(records, authors, now, config)
    logger.debug(f"Computed dashboard section '{section}' from {len(records)} records")
    return payload
