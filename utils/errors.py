# utils/errors.py
"""
Error taxonomy for the directory API.

Every error carries the HTTP status it maps to; the app-level handler in
app.py turns them into {"message": ...} responses.
"""


class DirectoryError(Exception):
    """Base class for errors that are reported to the caller."""

    status_code = 500
    default_message = "Unexpected server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DirectoryError):
    status_code = 400
    default_message = "Invalid request."


class AuthError(DirectoryError):
    # Same message for unknown email and wrong password
    status_code = 401
    default_message = "Invalid email or password."


class NotFoundError(DirectoryError):
    status_code = 404
    default_message = "User not found."


class ConflictError(DirectoryError):
    status_code = 409
    default_message = "Account already exists with this email."


class UnavailableError(DirectoryError):
    status_code = 503
    default_message = "Database service unavailable. Connection failed."


class UnexpectedError(DirectoryError):
    status_code = 500
