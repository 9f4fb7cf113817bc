# utils/passwords.py
import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes
_MAX_PASSWORD_BYTES = 72

# rounds -> throwaway digest, built on first use
_dummy_hashes = {}


def _to_bytes(password: str) -> bytes:
    if isinstance(password, bytes):
        password_bytes = password
    else:
        password_bytes = str(password).encode("utf-8")
    return password_bytes[:_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plaintext password with a fresh random salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a plaintext password against a stored digest.
    A missing or malformed digest never matches.
    """
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_to_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        return False


def burn_verification(password: str, rounds: int = DEFAULT_ROUNDS) -> None:
    """
    Run one throwaway check at the given cost. Login calls this when the
    email is unknown so both failure paths do the same amount of work.
    """
    dummy = _dummy_hashes.get(rounds)
    if dummy is None:
        dummy = hash_password("colabx-unknown-user", rounds)
        _dummy_hashes[rounds] = dummy
    verify_password(password, dummy)
