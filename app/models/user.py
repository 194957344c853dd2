from app.extensions import db
from datetime import datetime
from app.models.records import AuthorRecord
from app.utils.enums import UserRole

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    role = db.Column(db.String(20), nullable=False, default=UserRole.STUDENT.value)
    attendance_percentage = db.Column(db.Float, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_author(self) -> AuthorRecord:
        return AuthorRecord(
            id=self.id,
            username=self.username,
            role=UserRole(self.role),
            attendance_percentage=self.attendance_percentage or 0,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "attendance_percentage": self.attendance_percentage,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.id}: {self.username}>"
