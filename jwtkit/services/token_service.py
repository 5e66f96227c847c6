"""Token service for issuing and verifying compact JWTs."""

import json
import logging
import math
import time
from collections.abc import Mapping
from typing import Any, Callable

from jwtkit.core import base64url
from jwtkit.core.algorithms import Algorithm, get_algorithm
from jwtkit.core.config import settings
from jwtkit.core.errors import (
    InvalidClaimError,
    InvalidHeaderError,
    InvalidInputError,
    InvalidSignatureError,
    JWTError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from jwtkit.core.keys import KeyMaterial
from jwtkit.core.security import ParsedToken, parse_token

logger = logging.getLogger(__name__)

TEMPORAL_CLAIMS = ("exp", "nbf")


def _to_json(value: Mapping[str, Any], sort_keys: bool = False) -> bytes:
    """Serialize to compact JSON, UTF-8 encoded."""
    return json.dumps(
        value, separators=(",", ":"), sort_keys=sort_keys, allow_nan=False
    ).encode("utf-8")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints of any size compare exactly with the clock; only floats can be inf
    return isinstance(value, int) or math.isfinite(value)


def _check_key(key: Any, name: str = "Key") -> None:
    if not isinstance(key, (str, bytes)):
        raise InvalidInputError(f"{name} must be str or bytes")


class TokenService:
    """
    Service for encoding, verifying and decoding JWTs.

    ``verify`` pins the algorithm to the caller's choice and is the entry
    point for any trust decision. ``decode`` reads the algorithm from the
    token itself and exists for symmetric setups and for inspection with
    ``verify=False``.

    Usage:
        >>> service = TokenService()
        >>> token = service.encode({"sub": "alice"}, "secret")
        >>> service.verify(token, "HS256", "secret")
        {'sub': 'alice'}
    """

    def __init__(
        self,
        default_algorithm: str | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """
        Initialize the token service.

        Args:
            default_algorithm: Algorithm for encode() (uses config if not provided)
            clock: Returns the current Unix time in seconds (defaults to time.time)
        """
        self.default_algorithm = default_algorithm or settings.DEFAULT_ALGORITHM
        self._clock = clock or time.time

    def encode(
        self,
        claims: Mapping[str, Any],
        key: KeyMaterial,
        algorithm: str | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Create a signed compact token.

        The header is ``headers`` merged with ``typ="JWT"`` and ``alg``; those
        two always override caller values. ``headers`` is not modified.

        Args:
            claims: JSON-serializable claims mapping
            key: HMAC secret, or PEM private key for RS algorithms
            algorithm: Algorithm name (defaults to the service default)
            headers: Extra header fields

        Returns:
            Token string ``header.claims.signature``

        Raises:
            InvalidInputError: Wrong argument types, empty key, non-JSON values
            UnsupportedAlgorithmError: Unregistered algorithm
            InvalidKeyError: Key unusable for the algorithm
        """
        if not isinstance(claims, Mapping):
            raise InvalidInputError("Claims must be a mapping")
        _check_key(key)
        if not key:
            raise InvalidInputError("Key must not be empty")
        if headers is not None and not isinstance(headers, Mapping):
            raise InvalidInputError("Headers must be a mapping")

        alg = get_algorithm(algorithm if algorithm is not None else self.default_algorithm)

        header = dict(headers or {})
        header["typ"] = "JWT"
        header["alg"] = alg.name

        try:
            header_segment = base64url.encode(_to_json(header, sort_keys=True))
            claims_segment = base64url.encode(_to_json(claims))
        except (TypeError, ValueError) as exc:
            raise InvalidInputError("Header and claims must be JSON serializable") from exc

        signing_input = f"{header_segment}.{claims_segment}"
        signature = alg.sign(signing_input.encode("ascii"), key)

        logger.debug(
            "Token encoded",
            extra={"alg": alg.name, "claim_names": [str(name) for name in claims]},
        )
        return f"{signing_input}.{base64url.encode(signature)}"

    def verify(self, token: str, algorithm: str, key: KeyMaterial) -> dict[str, Any]:
        """
        Verify a token against a caller-chosen algorithm and return its claims.

        The header ``alg`` must equal ``algorithm`` exactly. Use this method
        whenever the key is an RSA public key.

        Raises:
            InvalidInputError: Wrong argument types
            UnsupportedAlgorithmError: ``algorithm`` not registered
            MalformedTokenError: Not three segments, bad base64 or bad JSON
            InvalidHeaderError: ``typ`` not JWT, or ``alg`` missing or different
            InvalidClaimError: ``exp``/``nbf`` not numeric
            InvalidKeyError: Key unusable for the algorithm
            InvalidSignatureError: Signature mismatch
            TokenExpiredError: ``now >= exp``
            TokenNotYetValidError: ``now < nbf``
        """
        try:
            if not isinstance(token, str):
                raise InvalidInputError("Token must be a string")
            if not isinstance(algorithm, str):
                raise InvalidInputError("Algorithm must be a string")
            _check_key(key)

            alg = get_algorithm(algorithm)
            parsed = parse_token(token)

            self._check_type(parsed.header)
            if parsed.header.get("alg") != algorithm:
                raise InvalidHeaderError("Invalid or incorrect alg")
            self._check_claim_types(parsed.claims)
            self._check_signature(alg, parsed, key)
            self._check_validity_window(parsed.claims)
        except JWTError as exc:
            logger.warning(
                "Token verification failed",
                extra={"error_kind": exc.kind.value, "alg": algorithm},
            )
            raise

        return parsed.claims

    def decode(
        self,
        token: str,
        key: KeyMaterial | None = None,
        verify: bool = True,
    ) -> dict[str, Any]:
        """
        Decode a token, optionally verifying it with the algorithm it names.

        With ``verify=False`` the claims are returned straight after parsing:
        no signature, ``typ``, ``exp`` or ``nbf`` checks run and ``key`` is
        not needed.

        Warning:
            Not safe with an RSA public key. The token chooses its own
            algorithm, so anyone holding the public key could present an
            HMAC token "signed" with it. Use ``verify()`` to pin the algorithm.
            HMAC secrets that look like public keys are refused, but pinning
            is the real defence.

        Raises:
            Same as ``verify``; additionally UnsupportedAlgorithmError when the
            token names an unregistered algorithm.
        """
        if not verify:
            if not isinstance(token, str):
                raise InvalidInputError("Token must be a string")
            parsed = parse_token(token)
            logger.debug("Token decoded without verification")
            return parsed.claims

        header_alg = None
        try:
            if not isinstance(token, str):
                raise InvalidInputError("Token must be a string")
            _check_key(key, "Key (required when verify is true)")

            parsed = parse_token(token)
            self._check_type(parsed.header)
            header_alg = parsed.header.get("alg")
            if not isinstance(header_alg, str):
                raise InvalidHeaderError("Invalid alg")
            self._check_claim_types(parsed.claims)
            alg = get_algorithm(header_alg)
            self._check_signature(alg, parsed, key)
            self._check_validity_window(parsed.claims)
        except JWTError as exc:
            logger.warning(
                "Token verification failed",
                extra={"error_kind": exc.kind.value, "alg": header_alg},
            )
            raise

        return parsed.claims

    def _check_type(self, header: dict[str, Any]) -> None:
        # typ is optional; only validated when present
        if "typ" in header and header["typ"] != "JWT":
            raise InvalidHeaderError("Invalid typ")

    def _check_claim_types(self, claims: dict[str, Any]) -> None:
        for name in TEMPORAL_CLAIMS:
            if name in claims and not _is_number(claims[name]):
                raise InvalidClaimError(f"{name} must be number")

    def _check_signature(self, alg: Algorithm, parsed: ParsedToken, key: KeyMaterial) -> None:
        if not alg.verify(parsed.signing_input, parsed.signature, key):
            raise InvalidSignatureError("Invalid signature")

    def _check_validity_window(self, claims: dict[str, Any]) -> None:
        now = self._clock()
        if "exp" in claims and now >= claims["exp"]:
            raise TokenExpiredError("Not acceptable by exp")
        if "nbf" in claims and now < claims["nbf"]:
            raise TokenNotYetValidError("Not acceptable by nbf")


# Module-level singleton (lazy initialization)
_token_service: TokenService | None = None


def get_token_service() -> TokenService:
    """
    Get the singleton TokenService instance.

    Returns:
        Singleton TokenService using the configured default algorithm and
        the system clock
    """
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service
