# controllers/search_controller.py
from typing import Optional

from sqlalchemy import or_

from db.user_store import get_user_store
from models.user import User, UserSkill, to_external


def _clean(text) -> str:
    return text.strip() if isinstance(text, str) else ""


def build_search_condition(query: Optional[str] = None, location: Optional[str] = None):
    """
    Build the filter for a profile search, or None when there is nothing to
    search for.

    Conditions are OR-ed, so a user matching only the name, only one skill
    or only the city is returned. Every match is a case-insensitive,
    unanchored substring test; the user's text is taken literally, so
    "%" or "_" in it match themselves.
    """
    query = _clean(query)
    location = _clean(location)

    conditions = []
    if query:
        conditions.append(User.name.icontains(query, autoescape=True))
        conditions.append(User.skill_rows.any(UserSkill.value.icontains(query, autoescape=True)))
    if location:
        conditions.append(User.city.icontains(location, autoescape=True))

    if not conditions:
        return None
    return or_(*conditions)


def search_profiles(flask_app, query: Optional[str] = None, location: Optional[str] = None) -> list:
    condition = build_search_condition(query, location)
    # Empty search means no results, not every profile
    if condition is None:
        return []
    users = get_user_store(flask_app).find(condition)
    return [to_external(user) for user in users]
