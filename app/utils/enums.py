from enum import Enum

class UserRole(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"

class FeedbackCategory(str, Enum):
    COLLEGE = "College"
    FACULTY = "Faculty"
    CAMPUS = "Campus"
    SYLLABUS = "Syllabus"
    OTHER = "Other"

class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
