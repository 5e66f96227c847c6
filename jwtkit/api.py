"""
Result-returning public API.

These functions never raise ``JWTError``: failures come back as a
``Result`` carrying the exception, its ``ErrorKind`` and message, so
callers can branch on ``result.kind``. Exceptions that are not
``JWTError`` indicate a bug and still propagate.

Usage:
    from jwtkit import api

    result = api.verify(token, "HS256", secret)
    if result.ok:
        claims = result.value
    elif result.kind is ErrorKind.TOKEN_EXPIRED:
        ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from jwtkit.core.errors import ErrorKind, JWTError
from jwtkit.core.keys import KeyMaterial
from jwtkit.services.token_service import get_token_service

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a token operation: a value or a ``JWTError``."""

    value: Optional[T] = None
    error: Optional[JWTError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _capture(operation: Callable[[], T]) -> Result[T]:
    try:
        return Result(value=operation())
    except JWTError as exc:
        return Result(error=exc)


def encode(
    claims: Mapping[str, Any],
    key: KeyMaterial,
    algorithm: Optional[str] = None,
    headers: Optional[Mapping[str, Any]] = None,
) -> Result[str]:
    """Encode and sign ``claims``; see ``TokenService.encode``."""
    return _capture(lambda: get_token_service().encode(claims, key, algorithm, headers))


def verify(token: str, algorithm: str, key: KeyMaterial) -> Result[dict[str, Any]]:
    """Verify ``token`` with a pinned algorithm; see ``TokenService.verify``."""
    return _capture(lambda: get_token_service().verify(token, algorithm, key))


def decode(
    token: str,
    key: Optional[KeyMaterial] = None,
    verify: bool = True,
) -> Result[dict[str, Any]]:
    """
    Decode ``token`` using the algorithm it names; see ``TokenService.decode``.

    Never use with an RSA public key; call ``verify`` instead.
    """
    return _capture(lambda: get_token_service().decode(token, key, verify))
