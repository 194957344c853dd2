import logging
from app.exceptions import StoreUnavailable
from app.services.feedback_service import list_users
from app.utils.http import ok, server_error

logger = logging.getLogger(__name__)

def list_users_handler():
    try:
        users = list_users()
    except StoreUnavailable:
        logger.exception("Listing users failed")
        return server_error()

    return ok({"users": [u.to_dict() for u in users]})
