# controllers/profiles_controller.py
from db.user_store import get_user_store
from models.user import to_external
from utils.errors import NotFoundError


def list_profiles(flask_app) -> list:
    """Every user, newest first."""
    users = get_user_store(flask_app).find(newest_first=True)
    return [to_external(user) for user in users]


def get_profile(flask_app, uid) -> dict:
    try:
        user_id = int(uid)
    except (TypeError, ValueError):
        raise NotFoundError()

    # ids are positive 64-bit integers
    if not 0 < user_id < 2 ** 63:
        raise NotFoundError()

    user = get_user_store(flask_app).get(user_id)
    if user is None:
        raise NotFoundError()
    return to_external(user)
