"""Core token primitives: codec, tokenizer, keys, algorithms and errors."""

from jwtkit.core.algorithms import ALGORITHMS, Algorithm, KeyKind, get_algorithm
from jwtkit.core.errors import ErrorKind, JWTError

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "KeyKind",
    "get_algorithm",
    "ErrorKind",
    "JWTError",
]
