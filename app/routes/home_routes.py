from flask import Blueprint
from app.controllers.home_controller import home_index, health_check

home_bp = Blueprint("home", __name__)

@home_bp.route("/")
def home():
    return home_index()

@home_bp.route("/health")
def health():
    return health_check()
