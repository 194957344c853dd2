"""Immutable records handed from the store to the analytics layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.utils.enums import FeedbackCategory, SentimentLabel, UserRole


@dataclass(frozen=True)
class FeedbackRecord:
    """A stored feedback submission with its sentiment already attached."""

    id: int
    text: str
    category: FeedbackCategory
    sentiment_score: int
    sentiment_label: SentimentLabel
    author_id: int
    author_name: str
    created_at: datetime


@dataclass(frozen=True)
class AuthorRecord:
    """The slice of a user the attendance correlation joins against."""

    id: int
    username: str
    role: UserRole
    attendance_percentage: float
