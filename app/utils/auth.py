import datetime as dt
from functools import wraps
from flask import request, jsonify, current_app
import jwt
from app.utils.enums import UserRole


def create_token(user_id: int, role: str) -> str:
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": int(dt.datetime.utcnow().timestamp()),
        "exp": int((dt.datetime.utcnow() + dt.timedelta(hours=12)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Missing Bearer token"}}), 401
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            request.user_id = int(payload["sub"])  # type: ignore
            request.user_role = payload.get("role")  # type: ignore
        except (jwt.InvalidTokenError, KeyError, ValueError):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Invalid token"}}), 401
        return f(*args, **kwargs)
    return wrapper


def require_role(role: UserRole):
    def decorator(f):
        @wraps(f)
        @require_auth
        def wrapper(*args, **kwargs):
            if getattr(request, "user_role", None) != role.value:
                return jsonify({"error": {"code": "FORBIDDEN", "message": f"{role.value.capitalize()} access required"}}), 403
            return f(*args, **kwargs)
        return wrapper
    return decorator


require_admin = require_role(UserRole.ADMIN)
require_student = require_role(UserRole.STUDENT)

__all__ = ["create_token", "decode_token", "require_auth", "require_admin", "require_student"]
