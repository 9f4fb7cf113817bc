# controllers/register_controller.py
import math
from typing import Any, List

import pydantic
from pydantic import BaseModel, Field, field_validator

from db.user_store import get_user_store
from utils.errors import ConflictError, ValidationError
from utils.passwords import DEFAULT_ROUNDS, hash_password

REQUIRED_MESSAGE = "Name, email, and password are required."

# Largest value a signed 64-bit INTEGER column holds
MAX_EXPERIENCE = 2 ** 63 - 1


# ---- Input shaping ----
def normalize_skills(value: Any) -> List[str]:
    """
    Accept a list of skills or one comma-separated string and return the
    trimmed, non-empty tokens in input order. Anything else gives [].
    """
    if isinstance(value, (list, tuple)):
        tokens = [str(item).strip() for item in value if item is not None]
    elif isinstance(value, str):
        tokens = [item.strip() for item in value.split(",")]
    else:
        return []
    return [token for token in tokens if token]


def coerce_experience(value: Any) -> int:
    """
    Loose numeric coercion: junk, NaN, infinities and negatives all become 0.
    Values beyond the column range are capped at MAX_EXPERIENCE.
    """
    if isinstance(value, bool):
        number = int(value)
    elif isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0
        try:
            number = float(stripped)
        except ValueError:
            return 0
    else:
        return 0

    if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
        return 0
    return min(max(0, int(number)), MAX_EXPERIENCE)


class RegisterSchema(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    city: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: int = 0
    portfolio: str = ""

    @field_validator("city", "portfolio", mode="before")
    @classmethod
    def blank_if_missing(cls, value):
        return str(value) if value else ""

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value):
        return normalize_skills(value)

    @field_validator("experience", mode="before")
    @classmethod
    def loose_experience(cls, value):
        return coerce_experience(value)


# ---- Main controller ----
def process_registration(payload: dict, flask_app) -> str:
    """
    Validate the payload, refuse duplicate emails, store the user with a
    hashed password and return the new uid.

    The duplicate check is a lookup before insert. Two concurrent requests
    for one email can both pass it; the UNIQUE constraint on users.email
    then turns the slower insert into a ConflictError too.
    """
    if not isinstance(payload, dict):
        raise ValidationError(REQUIRED_MESSAGE)
    try:
        validated = RegisterSchema.model_validate(payload)
    except pydantic.ValidationError as ve:
        raise ValidationError(REQUIRED_MESSAGE) from ve

    store = get_user_store(flask_app)
    if store.find_one(validated.email) is not None:
        raise ConflictError()

    rounds = flask_app.config.get("BCRYPT_ROUNDS") or DEFAULT_ROUNDS
    uid = store.insert_one(
        {
            "name": validated.name,
            "email": validated.email,
            "password_hash": hash_password(validated.password, rounds),
            "city": validated.city,
            "skills": validated.skills,
            "experience": validated.experience,
            "portfolio": validated.portfolio,
            "profile_pic": "",
        }
    )
    flask_app.logger.info("Registered user uid=%s", uid)
    return str(uid)
