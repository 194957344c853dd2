import logging
from flask import Flask
from app.extensions import db, cors
from flask_migrate import Migrate
from app.routes import register_routes
from app.services.analytics_service import AnalyticsConfig
from app.utils.http import error

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=app.config.get("LOG_LEVEL", "INFO"),
    )

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    # Shared, read-only analytics settings (stop words, window, limits)
    app.extensions["analytics_config"] = AnalyticsConfig.from_mapping(app.config)

    register_routes(app)

    @app.errorhandler(404)
    def not_found(e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(500)
    def internal_error(e):
        return error("SERVER_ERROR", "Server error", 500)

    return app
