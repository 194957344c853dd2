from app.extensions import db
from datetime import datetime
from app.models.records import FeedbackRecord
from app.utils.enums import FeedbackCategory, SentimentLabel

class Feedback(db.Model):
    __tablename__ = "feedbacks"
    __table_args__ = (
        db.Index("ix_feedbacks_category_label", "category", "sentiment_label"),
    )

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.String(1000), nullable=False)
    category = db.Column(db.String(20), nullable=False)
    sentiment_score = db.Column(db.Integer, nullable=False)
    sentiment_label = db.Column(db.String(10), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    username = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    user = db.relationship("User", backref="feedbacks")

    def to_record(self) -> FeedbackRecord:
        """Convert the row into a typed record; bad enum values raise ValueError."""
        return FeedbackRecord(
            id=self.id,
            text=self.text,
            category=FeedbackCategory(self.category),
            sentiment_score=int(self.sentiment_score),
            sentiment_label=SentimentLabel(self.sentiment_label),
            author_id=self.user_id,
            author_name=self.username,
            created_at=self.created_at,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "feedback": self.text,
            "type": self.category,
            "sentiment": {
                "score": self.sentiment_score,
                "label": self.sentiment_label,
            },
            "username": self.username,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Feedback {self.id}: {self.category}/{self.sentiment_label}>"
