"""
Signature algorithm registry.

The set of algorithms is closed: each ``Algorithm`` member binds a SHA-2
digest and a key kind, and dispatches signing and verification on that
pair. ``none`` and every other JWA name are deliberately absent.

Usage:
    from jwtkit.core.algorithms import get_algorithm

    alg = get_algorithm("HS256")
    signature = alg.sign(b"header.claims", "secret")
    assert alg.verify(b"header.claims", signature, "secret")
"""

import hmac
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from jwtkit.core.errors import InvalidKeyError, UnsupportedAlgorithmError
from jwtkit.core.keys import (
    KeyMaterial,
    hmac_secret,
    load_rsa_private_key,
    load_rsa_public_key,
)

_HASHES: Mapping[str, type[hashes.HashAlgorithm]] = MappingProxyType({
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
})


class KeyKind(str, Enum):
    """Kind of key material an algorithm consumes."""

    HMAC = "hmac"  # shared secret
    RSA = "rsa"  # PEM key pair


class Algorithm(Enum):
    """Supported JWS algorithms, keyed by their JWA name."""

    HS256 = ("sha256", KeyKind.HMAC)
    HS384 = ("sha384", KeyKind.HMAC)
    HS512 = ("sha512", KeyKind.HMAC)
    RS256 = ("sha256", KeyKind.RSA)
    RS384 = ("sha384", KeyKind.RSA)
    RS512 = ("sha512", KeyKind.RSA)

    def __init__(self, digest_name: str, key_kind: KeyKind):
        self.digest_name = digest_name
        self.key_kind = key_kind

    def _hash(self) -> hashes.HashAlgorithm:
        return _HASHES[self.digest_name]()

    def sign(self, message: bytes, key: KeyMaterial) -> bytes:
        """
        Sign ``message`` with ``key``.

        Raises:
            InvalidKeyError: If the key cannot be used with this algorithm
        """
        if self.key_kind is KeyKind.HMAC:
            return hmac.new(hmac_secret(key), message, self.digest_name).digest()

        private_key = load_rsa_private_key(key)
        try:
            return private_key.sign(message, padding.PKCS1v15(), self._hash())
        except ValueError as exc:
            # modulus shorter than the DigestInfo encoding
            raise InvalidKeyError("Key too small for algorithm") from exc

    def verify(self, message: bytes, signature: bytes, key: KeyMaterial) -> bool:
        """
        Check ``signature`` over ``message``.

        HMAC signatures are compared in constant time. RSA verification is
        delegated to ``cryptography``.

        Raises:
            InvalidKeyError: If the key cannot be used with this algorithm
        """
        if self.key_kind is KeyKind.HMAC:
            expected = hmac.new(hmac_secret(key), message, self.digest_name).digest()
            return hmac.compare_digest(expected, signature)

        public_key = load_rsa_public_key(key)
        try:
            public_key.verify(signature, message, padding.PKCS1v15(), self._hash())
        except InvalidSignature:
            return False
        return True


# Read-only name -> algorithm table, built once at import
ALGORITHMS: Mapping[str, Algorithm] = MappingProxyType(
    {algorithm.name: algorithm for algorithm in Algorithm}
)


def get_algorithm(name: object) -> Algorithm:
    """
    Look up a registered algorithm by exact, case-sensitive name.

    Raises:
        UnsupportedAlgorithmError: For any unregistered name, including ``none``
    """
    if isinstance(name, str):
        algorithm = ALGORITHMS.get(name)
        if algorithm is not None:
            return algorithm
    raise UnsupportedAlgorithmError("Algorithm not supported")


def is_supported(name: object) -> bool:
    return isinstance(name, str) and name in ALGORITHMS
