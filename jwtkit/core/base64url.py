"""Unpadded, URL-safe base64 as used by JWT segments."""

import base64
import binascii
import re

from jwtkit.core.errors import DecodeError

_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")
_TO_STANDARD = str.maketrans("-_", "+/")


def encode(data: bytes) -> str:
    """Encode bytes as base64url with all ``=`` padding stripped."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(data: str | bytes) -> bytes:
    """
    Decode unpadded base64url.

    Padding is restored to a multiple of four before decoding. Input must use
    only the URL-safe alphabet; padding characters, whitespace and the
    standard ``+``/``/`` characters are rejected.

    Raises:
        DecodeError: On a bad alphabet, non-ASCII input or impossible length
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise DecodeError("Base64url data must be ASCII") from exc
    elif not isinstance(data, str):
        raise DecodeError("Base64url data must be str or bytes")

    if not _URLSAFE_ALPHABET.fullmatch(data):
        raise DecodeError("Invalid base64url alphabet")

    # A single trailing character can never carry a whole byte
    if len(data) % 4 == 1:
        raise DecodeError("Invalid base64url length")

    padded = data + "=" * ((4 - len(data) % 4) % 4)
    try:
        return base64.b64decode(padded.translate(_TO_STANDARD), validate=True)
    except binascii.Error as exc:
        raise DecodeError("Invalid base64url padding") from exc
