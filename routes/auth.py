# routes/auth.py
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import BadRequest

from controllers.login_controller import process_login
from controllers.register_controller import process_registration
from utils.errors import DirectoryError, UnexpectedError, ValidationError

bp = Blueprint("auth", __name__, url_prefix="/api")


def read_payload():
    """Request body as a dict; JSON and form posts are both accepted."""
    if request.form:
        payload = request.form.to_dict()
        skills = request.form.getlist("skills")
        if len(skills) > 1:
            payload["skills"] = skills
        return payload
    if not request.get_data():
        return {}
    try:
        return request.get_json(force=True)
    except BadRequest:
        raise ValidationError("Invalid JSON")


@bp.route("/register", methods=["POST"])
def register():
    payload = read_payload()
    try:
        uid = process_registration(payload, current_app)
    except DirectoryError:
        raise
    except Exception as e:
        current_app.logger.exception("Registration failed")
        raise UnexpectedError("Registration failed due to a server error.") from e

    return jsonify({"message": "User registered successfully!", "uid": uid}), 201


@bp.route("/login", methods=["POST"])
def login():
    payload = read_payload()
    try:
        user = process_login(payload, current_app)
    except DirectoryError:
        raise
    except Exception as e:
        current_app.logger.exception("Login failed")
        raise UnexpectedError("Server error during login.") from e

    return jsonify({"message": "Login successful", "user": user}), 200
