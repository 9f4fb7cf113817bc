# routes/profiles.py
from flask import Blueprint, request, jsonify, current_app

from controllers.profiles_controller import get_profile, list_profiles
from controllers.search_controller import search_profiles
from utils.errors import DirectoryError, UnexpectedError

bp = Blueprint("profiles", __name__, url_prefix="/api")


@bp.route("/profiles", methods=["GET"])
def profiles():
    try:
        result = list_profiles(current_app)
    except DirectoryError:
        raise
    except Exception as e:
        current_app.logger.exception("All profiles fetch failed")
        raise UnexpectedError("Server error fetching profiles.") from e
    return jsonify(result), 200


@bp.route("/profile/<uid>", methods=["GET"])
def profile(uid):
    try:
        result = get_profile(current_app, uid)
    except DirectoryError:
        raise
    except Exception as e:
        current_app.logger.exception("Profile fetch failed for uid=%s", uid)
        raise UnexpectedError("Server error fetching profile.") from e
    return jsonify(result), 200


@bp.route("/search", methods=["GET"])
def search():
    query = request.args.get("query", "")
    location = request.args.get("location", "")
    try:
        result = search_profiles(current_app, query, location)
    except DirectoryError:
        raise
    except Exception as e:
        current_app.logger.exception("Search failed")
        raise UnexpectedError("Server error during search.") from e
    return jsonify(result), 200
