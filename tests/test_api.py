import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from app import create_app
from app.extensions import db
from app.models.user import User
from app.models.feedback import Feedback
from app.utils.auth import create_token


@pytest.fixture()
def app():
    app = create_app("config.TestingConfig")
    with app.app_context():
        db.create_all()
        db.session.add_all([
            User(username="student_eligible", role="student", attendance_percentage=92),
            User(username="student_ineligible", role="student", attendance_percentage=68),
            User(username="admin", role="admin", attendance_percentage=0),
        ])
        db.session.commit()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def auth_headers(username):
    user = User.query.filter_by(username=username).first()
    return {"Authorization": f"Bearer {create_token(user.id, user.role)}"}


def test_home_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"


def test_submit_requires_token(client):
    r = client.post("/api/feedback/submit", json={"feedback": "Great", "type": "College"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "UNAUTHORIZED"

    r = client.post("/api/feedback/submit", headers={"Authorization": "Bearer garbage"},
                    json={"feedback": "Great", "type": "College"})
    assert r.status_code == 401


def test_admin_cannot_submit(client):
    r = client.post("/api/feedback/submit", headers=auth_headers("admin"),
                    json={"feedback": "Great", "type": "College"})
    assert r.status_code == 403
    assert r.get_json()["error"]["code"] == "FORBIDDEN"


def test_submit_positive_feedback(client, app):
    r = client.post("/api/feedback/submit", headers=auth_headers("student_eligible"), json={
        "feedback": "  The teachers are excellent and the library is wonderful  ",
        "type": "Faculty",
    })
    assert r.status_code == 201
    data = r.get_json()
    assert data["message"] == "Feedback submitted successfully"
    fb = data["feedback"]
    assert fb["feedback"] == "The teachers are excellent and the library is wonderful"
    assert fb["type"] == "Faculty"
    assert fb["sentiment"]["label"] == "positive"
    assert fb["sentiment"]["score"] > 0
    assert fb["username"] == "student_eligible"

    stored = db.session.get(Feedback, fb["id"])
    assert stored.sentiment_label == "positive"
    assert stored.user.username == "student_eligible"


def test_submit_negative_feedback(client):
    r = client.post("/api/feedback/submit", headers=auth_headers("student_eligible"), json={
        "feedback": "The parking is terrible and the wifi is awful",
        "type": "Campus",
    })
    assert r.status_code == 201
    sentiment = r.get_json()["feedback"]["sentiment"]
    assert sentiment["label"] == "negative"
    assert sentiment["score"] < 0


@pytest.mark.parametrize("payload", [
    {"type": "College"},
    {"feedback": "", "type": "College"},
    {"feedback": "    ", "type": "College"},
    {"feedback": "x" * 1001, "type": "College"},
    {"feedback": "Fine", "type": "Hostel"},
    {"feedback": "Fine"},
])
def test_submit_validation(client, payload):
    r = client.post("/api/feedback/submit", headers=auth_headers("student_eligible"), json=payload)
    assert r.status_code == 400
    body = r.get_json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]
    assert Feedback.query.count() == 0


def test_submit_accepts_max_length(client):
    r = client.post("/api/feedback/submit", headers=auth_headers("student_eligible"),
                    json={"feedback": "x" * 1000, "type": "Other"})
    assert r.status_code == 201


def test_attendance_gate(client):
    r = client.post("/api/feedback/submit", headers=auth_headers("student_ineligible"),
                    json={"feedback": "Labs are great", "type": "College"})
    assert r.status_code == 403
    body = r.get_json()["error"]
    assert body["code"] == "ATTENDANCE_TOO_LOW"
    assert body["attendance_percentage"] == 68
    assert "75%" in body["message"]
    assert Feedback.query.count() == 0


def test_eligibility(client):
    r = client.get("/api/feedback/eligibility", headers=auth_headers("student_eligible"))
    assert r.status_code == 200
    data = r.get_json()
    assert data["is_eligible"] is True
    assert data["attendance_percentage"] == 92

    r = client.get("/api/feedback/eligibility", headers=auth_headers("student_ineligible"))
    data = r.get_json()
    assert data["is_eligible"] is False
    assert data["message"] == "You must have at least 75% attendance to submit feedback"


def test_unknown_user_token(client, app):
    headers = {"Authorization": f"Bearer {create_token(9999, 'student')}"}
    r = client.get("/api/feedback/eligibility", headers=headers)
    assert r.status_code == 401


def test_my_feedback_lists_only_own_newest_first(client):
    headers = auth_headers("student_eligible")
    for text in ["First comment about syllabus", "Second comment about syllabus"]:
        r = client.post("/api/feedback/submit", headers=headers, json={"feedback": text, "type": "Syllabus"})
        assert r.status_code == 201

    other = User(username="another_student", role="student", attendance_percentage=85)
    db.session.add(other)
    db.session.commit()
    client.post("/api/feedback/submit", headers=auth_headers("another_student"),
                json={"feedback": "Not mine", "type": "Other"})

    r = client.get("/api/feedback/my-feedback", headers=headers)
    assert r.status_code == 200
    feedbacks = r.get_json()["feedbacks"]
    assert len(feedbacks) == 2
    assert {f["feedback"] for f in feedbacks} == {"First comment about syllabus", "Second comment about syllabus"}
    assert feedbacks[0]["created_at"] >= feedbacks[1]["created_at"]
    assert "user_id" not in feedbacks[0]
