"""
Format checks for user supplied credentials.
"""
from ..errors import InvalidInput

USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32


def _has_whitespace(value: str) -> bool:
    return any(ch.isspace() for ch in value)


def check_credentials(username: str, password: str) -> None:
    """
    Raises:
        InvalidInput: If username is not 1..32 characters or password is not
                      6..32 characters, or either contains whitespace
    """
    if not username or len(username) > USERNAME_MAX_LENGTH or _has_whitespace(username):
        raise InvalidInput(f"username must be 1-{USERNAME_MAX_LENGTH} characters without spaces")
    if not password or not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH \
            or _has_whitespace(password):
        raise InvalidInput(
            f"password must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters without spaces"
        )
