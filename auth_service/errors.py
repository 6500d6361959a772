"""
Error kinds raised by the authentication service.

Every error carries the HTTP status and the public message the API layer
renders for it. The message is what a client sees, so it never names the
internal check that failed.
"""


class AuthServiceError(Exception):
    """Base class for all errors raised by the service."""

    http_status = 500
    public_message = "internal error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.public_message
        super().__init__(self.detail)


# ---------------- Auth handlers ----------------

class InvalidInput(AuthServiceError):
    http_status = 400
    public_message = "malformed username or password"


class UsernameTaken(AuthServiceError):
    http_status = 409
    public_message = "username already exists"


class InvalidCredentials(AuthServiceError):
    http_status = 401
    public_message = "invalid username or password"


class UserNotFound(AuthServiceError):
    http_status = 404
    public_message = "user not found"


# ---------------- Cipher utility ----------------

class CryptoError(AuthServiceError):
    public_message = "crypto operation failed"


class InvalidKey(CryptoError):
    public_message = "crypto key is illegal, check the configuration"


class MalformedPadding(CryptoError):
    http_status = 400
    public_message = "malformed padding"


class DecodeError(CryptoError):
    http_status = 400
    public_message = "could not decode the encrypted string"


class UnknownEncodingError(CryptoError):
    public_message = "unknown encoding"


# ---------------- Tokens ----------------

class TokenError(AuthServiceError):
    http_status = 401
    public_message = "invalid or expired token"


class TokenIllegalError(TokenError):
    """The token is not valid yet (nbf lies in the future)."""


class TokenExpiredError(TokenError):
    """The token is older than the configured max age."""


class TokenMalformedError(TokenError):
    """Bad signature or unparseable structure."""


class SigningError(TokenError):
    http_status = 500
    public_message = "could not issue token"


# ---------------- Cache ----------------

class CacheError(AuthServiceError):
    public_message = "cache operation failed"


class KeyNotFoundError(CacheError):
    public_message = "can not find the key"


class KeyExistsError(CacheError):
    public_message = "this key is already in the cache"


class BadValueTypeError(CacheError):
    public_message = "incr only accepts int or float values"
