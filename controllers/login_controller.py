# controllers/login_controller.py
import pydantic
from pydantic import BaseModel, Field

from db.user_store import get_user_store
from models.user import to_external
from utils.errors import AuthError, ValidationError
from utils.passwords import DEFAULT_ROUNDS, burn_verification, verify_password

REQUIRED_MESSAGE = "Email and password are required."


class LoginSchema(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


def process_login(payload: dict, flask_app) -> dict:
    """
    Check email and password and return the user's public record.

    Unknown email and wrong password raise the same AuthError, and both
    paths run one bcrypt verification.
    """
    if not isinstance(payload, dict):
        raise ValidationError(REQUIRED_MESSAGE)
    try:
        credentials = LoginSchema.model_validate(payload)
    except pydantic.ValidationError as ve:
        raise ValidationError(REQUIRED_MESSAGE) from ve

    user = get_user_store(flask_app).find_one(credentials.email)
    if user is None:
        burn_verification(credentials.password, flask_app.config.get("BCRYPT_ROUNDS") or DEFAULT_ROUNDS)
        raise AuthError()
    if not verify_password(credentials.password, user.password_hash):
        raise AuthError()

    return to_external(user)
