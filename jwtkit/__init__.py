"""
jwtkit: issue and verify JSON Web Tokens (HS256/384/512, RS256/384/512).

Two entry styles are provided:

- ``jwtkit.api.encode / verify / decode`` return a ``Result`` and never
  raise ``JWTError``.
- ``TokenService`` raises typed ``JWTError`` subclasses.

Use ``verify`` (algorithm pinned by the caller) for every trust decision.
``decode`` trusts the token's own ``alg`` and must not be used with RSA
public keys.
"""

from jwtkit.api import Result, decode, encode, verify
from jwtkit.core.algorithms import ALGORITHMS, Algorithm
from jwtkit.core.errors import (
    DecodeError,
    ErrorKind,
    InvalidClaimError,
    InvalidHeaderError,
    InvalidInputError,
    InvalidKeyError,
    InvalidSignatureError,
    JWTError,
    MalformedTokenError,
    TokenExpiredError,
    TokenNotYetValidError,
    UnsupportedAlgorithmError,
)
from jwtkit.core.security import get_unverified_claims, get_unverified_header
from jwtkit.services.token_service import TokenService, get_token_service

__version__ = "0.1.0"

__all__ = [
    "Result",
    "encode",
    "verify",
    "decode",
    "ALGORITHMS",
    "Algorithm",
    "TokenService",
    "get_token_service",
    "get_unverified_header",
    "get_unverified_claims",
    "ErrorKind",
    "JWTError",
    "InvalidInputError",
    "UnsupportedAlgorithmError",
    "MalformedTokenError",
    "DecodeError",
    "InvalidHeaderError",
    "InvalidClaimError",
    "InvalidSignatureError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    "InvalidKeyError",
]
