import logging
from functools import wraps
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import StoreUnavailable
from app.extensions import db
from app.models.feedback import Feedback
from app.models.records import AuthorRecord, FeedbackRecord
from app.models.user import User
from app.services.sentiment_service import classify_and_attach_sentiment

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "created_at": Feedback.created_at,
    "category": Feedback.category,
    "sentiment_score": Feedback.sentiment_score,
    "username": Feedback.username,
}


def store_access(f):
    """Roll back and re-raise database failures as StoreUnavailable."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreUnavailable(f"{f.__name__} failed: {e}") from e
    return wrapper


def check_eligibility(user, threshold):
    return (user.attendance_percentage or 0) >= threshold


@store_access
def get_user(user_id):
    return db.session.get(User, user_id)


@store_access
def create_feedback(user, text, category, score_scale=10):
    """
    Creates a new feedback entry in the database.
    The sentiment is computed once here and never recomputed afterwards.
    """
    sentiment = classify_and_attach_sentiment(text, scale=score_scale)

    new_feedback = Feedback(
        text=text,
        category=category,
        sentiment_score=sentiment.score,
        sentiment_label=sentiment.label.value,
        user_id=user.id,
        username=user.username,
    )

    db.session.add(new_feedback)
    db.session.commit()
    logger.info(f"Feedback {new_feedback.id} stored for user {user.id} ({sentiment.label.value})")
    return new_feedback


@store_access
def get_user_feedbacks(user_id):
    """
    Retrieves all feedback submitted by a specific user, newest first.
    """
    return Feedback.query.filter_by(user_id=user_id).order_by(Feedback.created_at.desc()).all()


@store_access
def list_feedbacks(page=1, limit=10, category=None, sentiment=None, username=None,
                   sort_by="created_at", sort_order="desc"):
    """
    Filtered, sorted and paginated feedback listing for admins.
    A filter value of "all" is the same as no filter.
    """
    query = Feedback.query

    if category and category != "all":
        query = query.filter(Feedback.category == category)

    if sentiment and sentiment != "all":
        query = query.filter(Feedback.sentiment_label == sentiment)

    if username:
        query = query.filter(Feedback.username.ilike(f"%{username}%"))

    column = SORTABLE_FIELDS.get(sort_by, Feedback.created_at)
    ordering = column.desc() if sort_order == "desc" else column.asc()

    return query.order_by(ordering, Feedback.id.desc()).paginate(page=page, per_page=limit, error_out=False)


@store_access
def list_users():
    return User.query.order_by(User.created_at.desc()).all()


@store_access
def load_feedback_records() -> List[FeedbackRecord]:
    """Read every feedback row, in insertion order, as typed records."""
    return [f.to_record() for f in Feedback.query.order_by(Feedback.id.asc()).all()]


@store_access
def load_authors() -> Dict[int, AuthorRecord]:
    return {u.id: u.to_author() for u in User.query.order_by(User.id.asc()).all()}
