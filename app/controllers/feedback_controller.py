import logging
from flask import request, current_app
from app.exceptions import StoreUnavailable
from app.utils.http import ok, error, server_error, json_body, validate_schema, arg_int, arg_str
from app.schemas.feedback_schema import FeedbackSchema
from app.services.feedback_service import (
    check_eligibility,
    create_feedback,
    get_user,
    get_user_feedbacks,
    list_feedbacks,
)

logger = logging.getLogger(__name__)


def _eligibility_message(is_eligible, threshold):
    if is_eligible:
        return "You are eligible to submit feedback"
    return f"You must have at least {threshold}% attendance to submit feedback"


def _current_user():
    user = get_user(getattr(request, "user_id", None))
    if not user:
        return None, error("UNAUTHORIZED", "User not found", 401)
    return user, None


def create_feedback_handler():
    data, errors = validate_schema(FeedbackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid feedback data", 400, details=errors)

    threshold = current_app.config["ATTENDANCE_THRESHOLD"]
    try:
        user, err = _current_user()
        if err:
            return err

        if not check_eligibility(user, threshold):
            return error(
                "ATTENDANCE_TOO_LOW",
                _eligibility_message(False, threshold),
                403,
                attendance_percentage=user.attendance_percentage,
            )

        feedback = create_feedback(
            user,
            data["feedback"],
            data["type"],
            score_scale=current_app.config["SENTIMENT_SCORE_SCALE"],
        )
    except StoreUnavailable:
        logger.exception("Feedback submission failed")
        return server_error("Server error during feedback submission")

    return ok({
        "message": "Feedback submitted successfully",
        "feedback": feedback.to_dict(),
    }, 201)


def get_my_feedbacks_handler():
    try:
        feedbacks = get_user_feedbacks(request.user_id)
    except StoreUnavailable:
        logger.exception("Loading feedback history failed")
        return server_error()

    return ok({"feedbacks": [f.to_dict() for f in feedbacks]})


def get_eligibility_handler():
    threshold = current_app.config["ATTENDANCE_THRESHOLD"]
    try:
        user, err = _current_user()
    except StoreUnavailable:
        logger.exception("Eligibility check failed")
        return server_error()
    if err:
        return err

    is_eligible = check_eligibility(user, threshold)
    return ok({
        "is_eligible": is_eligible,
        "attendance_percentage": user.attendance_percentage,
        "message": _eligibility_message(is_eligible, threshold),
    })


def admin_list_feedbacks_handler():
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 10, min_value=1, max_value=100)

    try:
        pagination = list_feedbacks(
            page=page,
            limit=limit,
            category=(arg_str("type") or "").strip(),
            sentiment=(arg_str("sentiment") or "").strip().lower(),
            username=(arg_str("username") or "").strip(),
            sort_by=arg_str("sort_by", "created_at"),
            sort_order=(arg_str("sort_order") or "desc").strip().lower(),
        )
    except StoreUnavailable:
        logger.exception("Admin feedback listing failed")
        return server_error()

    return ok({
        "feedbacks": [f.to_dict() for f in pagination.items],
        "pagination": {
            "current_page": page,
            "total_pages": pagination.pages,
            "total_items": pagination.total,
            "items_per_page": limit,
        },
    })
