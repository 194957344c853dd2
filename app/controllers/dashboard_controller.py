import logging
from datetime import datetime
from flask import current_app
from app.exceptions import StoreUnavailable
from app.services.analytics_service import SECTIONS, SECTIONS_NEEDING_AUTHORS, compute_dashboard
from app.services.feedback_service import load_authors, load_feedback_records
from app.utils.http import ok, error, server_error

logger = logging.getLogger(__name__)


def get_dashboard_section_handler(section):
    if section not in SECTIONS:
        return error("NOT_FOUND", f"Unknown dashboard section '{section}'", 404)

    config = current_app.extensions["analytics_config"]
    try:
        records = load_feedback_records()
        authors = load_authors() if section in SECTIONS_NEEDING_AUTHORS else None
        payload = compute_dashboard(section, records, authors, now=datetime.utcnow(), config=config)
    except StoreUnavailable:
        logger.exception(f"Dashboard section '{section}' failed")
        return server_error()

    return ok(payload)
