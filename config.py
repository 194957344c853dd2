from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///feedback.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Recycle idle connections before the server drops them
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Students below this attendance may not submit feedback
    ATTENDANCE_THRESHOLD = int(os.getenv("ATTENDANCE_THRESHOLD", "75"))

    # Dashboard analytics
    DASHBOARD_WINDOW_DAYS = int(os.getenv("DASHBOARD_WINDOW_DAYS", "30"))
    WORD_CLOUD_LIMIT = int(os.getenv("WORD_CLOUD_LIMIT", "50"))
    SENTIMENT_SCORE_SCALE = int(os.getenv("SENTIMENT_SCORE_SCALE", "10"))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
