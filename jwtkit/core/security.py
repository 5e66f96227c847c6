"""
Token parsing and unverified inspection.

``parse_token`` is the shared front half of verification: it splits a
compact token, decodes every segment and loads the JSON header and claims.
It performs no cryptographic or temporal checks.

The ``get_unverified_*`` helpers expose that parse step for inspection,
e.g. reading ``kid`` to choose a key before verifying.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict

from jwtkit.core import base64url, tokenizer
from jwtkit.core.errors import DecodeError, InvalidInputError, MalformedTokenError

SEGMENT_COUNT = 3


@dataclass(frozen=True)
class ParsedToken:
    """Decoded parts of a compact token.

    Attributes:
        header: Decoded JSON header
        claims: Decoded JSON claims
        signature: Raw signature bytes
        signing_input: ASCII bytes of ``header_segment.claims_segment``
    """

    header: Dict[str, Any]
    claims: Dict[str, Any]
    signature: bytes
    signing_input: bytes


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _load_object(segment: str) -> Dict[str, Any]:
    value = json.loads(
        base64url.decode(segment).decode("utf-8"),
        parse_constant=_reject_constant,
    )
    if not isinstance(value, dict):
        raise ValueError("JSON segment is not an object")
    return value


def parse_token(token: str) -> ParsedToken:
    """
    Split and decode a compact token.

    Base64, UTF-8 and JSON failures are all reported as one malformed-token
    error.

    Args:
        token: Compact token string (header.claims.signature)

    Returns:
        ParsedToken with decoded header, claims and signature

    Raises:
        InvalidInputError: If token is not a string
        MalformedTokenError: If the token does not split into three segments
            or any segment fails to decode
    """
    if not isinstance(token, str):
        raise InvalidInputError("Token must be a string")

    segments = tokenizer.split(token, ".", SEGMENT_COUNT)
    if len(segments) != SEGMENT_COUNT:
        raise MalformedTokenError("Invalid token")

    header_segment, claims_segment, signature_segment = segments
    try:
        header = _load_object(header_segment)
        claims = _load_object(claims_segment)
        signature = base64url.decode(signature_segment)
    except (DecodeError, ValueError) as exc:
        # base64, UTF-8 and JSON errors are one category
        raise MalformedTokenError("Invalid json") from exc

    return ParsedToken(
        header=header,
        claims=claims,
        signature=signature,
        signing_input=f"{header_segment}.{claims_segment}".encode("ascii"),
    )


def get_unverified_header(token: str) -> Dict[str, Any]:
    """
    Extract the token header without verification.

    Used to read ``kid`` or ``alg`` before choosing a key. The result is
    attacker controlled until the token has been verified.

    Raises:
        MalformedTokenError: If the token cannot be parsed

    Example:
        >>> header = get_unverified_header(token)
        >>> key_id = header.get("kid")
    """
    return parse_token(token).header


def get_unverified_claims(token: str) -> Dict[str, Any]:
    """
    Extract the token claims without verification.

    Useful for debugging and logging only.

    Warning:
        Do NOT use these claims for access control decisions. Verify the
        token with ``TokenService.verify`` first.
    """
    return parse_token(token).claims
