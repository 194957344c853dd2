from flask import Blueprint
from app.utils.auth import require_student
from app.controllers.feedback_controller import (
    create_feedback_handler,
    get_my_feedbacks_handler,
    get_eligibility_handler
)

feedback_bp = Blueprint("feedback", __name__, url_prefix="/api/feedback")

@feedback_bp.route("/submit", methods=["POST"])
@require_student
def create_feedback():
    return create_feedback_handler()

@feedback_bp.route("/my-feedback", methods=["GET"])
@require_student
def get_my_feedbacks():
    return get_my_feedbacks_handler()

@feedback_bp.route("/eligibility", methods=["GET"])
@require_student
def get_eligibility():
    return get_eligibility_handler()
