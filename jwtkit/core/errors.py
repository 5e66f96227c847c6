"""
Error taxonomy for token encoding and verification.

Every failure raised by jwtkit is a ``JWTError`` carrying an ``ErrorKind``.
The kind is the stable, load-bearing part of an error; the message is for
humans and logs only. Callers should branch on ``error.kind`` (or on the
exception class) and never on message text.

Messages never contain key material.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a token failure."""

    TYPE_ERROR = "type_error"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_HEADER = "invalid_header"
    INVALID_CLAIM = "invalid_claim"
    INVALID_SIGNATURE = "invalid_signature"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_NOT_YET_VALID = "token_not_yet_valid"
    KEY_ERROR = "key_error"


class JWTError(Exception):
    """Base exception for all token operations."""

    kind: ErrorKind = ErrorKind.MALFORMED_TOKEN
    default_message: str = "Token error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidInputError(JWTError):
    """Raised when an argument has the wrong type or shape."""

    kind = ErrorKind.TYPE_ERROR
    default_message = "Invalid argument"


class UnsupportedAlgorithmError(JWTError):
    """Raised when an algorithm name is not in the registry."""

    kind = ErrorKind.UNSUPPORTED_ALGORITHM
    default_message = "Algorithm not supported"


class MalformedTokenError(JWTError):
    """Raised when a token cannot be split or parsed."""

    kind = ErrorKind.MALFORMED_TOKEN
    default_message = "Invalid token"


class DecodeError(MalformedTokenError):
    """Raised by the base64url codec on bad alphabet or padding."""

    default_message = "Invalid base64url data"


class InvalidHeaderError(JWTError):
    """Raised when ``typ`` or ``alg`` in the header is unacceptable."""

    kind = ErrorKind.INVALID_HEADER
    default_message = "Invalid header"


class InvalidClaimError(JWTError):
    """Raised when ``exp`` or ``nbf`` is present but not numeric."""

    kind = ErrorKind.INVALID_CLAIM
    default_message = "Invalid claim"


class InvalidSignatureError(JWTError):
    kind = ErrorKind.INVALID_SIGNATURE
    default_message = "Invalid signature"


class TokenExpiredError(JWTError):
    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Not acceptable by exp"


class TokenNotYetValidError(JWTError):
    kind = ErrorKind.TOKEN_NOT_YET_VALID
    default_message = "Not acceptable by nbf"


class InvalidKeyError(JWTError):
    """Raised when key material cannot be used for the requested algorithm."""

    kind = ErrorKind.KEY_ERROR
    default_message = "Invalid key"
