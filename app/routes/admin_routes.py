from flask import Blueprint
from app.utils.auth import require_admin
from app.controllers.admin_user_controller import list_users_handler
from app.controllers.feedback_controller import admin_list_feedbacks_handler
from app.controllers.dashboard_controller import get_dashboard_section_handler

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")

@admin_bp.route("/users", methods=["GET"])
@require_admin
def list_users():
    return list_users_handler()

@admin_bp.route("/feedback", methods=["GET"])
@require_admin
def list_feedbacks():
    return admin_list_feedbacks_handler()

@admin_bp.route("/dashboard/<section>", methods=["GET"])
@require_admin
def dashboard_section(section):
    return get_dashboard_section_handler(section)
