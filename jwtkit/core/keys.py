"""
Key material preparation for the signature algorithms.

HMAC secrets are used as raw bytes. RSA keys are PEM documents parsed with
``cryptography``. Parsing failures raise ``InvalidKeyError`` with a fixed
message so key contents never leak into errors or logs.
"""

import re

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from jwtkit.core.errors import InvalidKeyError

KeyMaterial = str | bytes

# Asymmetric key encodings that must never double as an HMAC secret.
_PEM_MARKER = re.compile(rb"-----BEGIN [A-Z0-9 ]+-----")
_SSH_KEY_PREFIXES = (
    b"ssh-rsa",
    b"ssh-ed25519",
    b"ssh-dss",
    b"ecdsa-sha2-",
)


def to_bytes(key: KeyMaterial) -> bytes:
    """Return key material as bytes, UTF-8 encoding strings."""
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def hmac_secret(key: KeyMaterial) -> bytes:
    """
    Prepare a shared HMAC secret.

    Public key documents are refused. A verifier that trusts the token's own
    ``alg`` and is handed an RSA public key would otherwise accept an HMAC
    token forged with that public key as the secret.

    Raises:
        InvalidKeyError: If the key is a PEM or OpenSSH encoded asymmetric key
    """
    secret = to_bytes(key)
    stripped = secret.strip()
    if _PEM_MARKER.search(stripped) or stripped.startswith(_SSH_KEY_PREFIXES):
        raise InvalidKeyError(
            "The specified key is an asymmetric key and should not be used as an HMAC secret"
        )
    return secret


def load_rsa_private_key(key: KeyMaterial) -> rsa.RSAPrivateKey:
    """
    Parse an unencrypted PEM RSA private key.

    Raises:
        InvalidKeyError: "Not a private PEM key" if parsing fails or the key is not RSA
    """
    try:
        private_key = serialization.load_pem_private_key(to_bytes(key), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyError("Not a private PEM key") from exc

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise InvalidKeyError("Not a private PEM key")
    return private_key


def load_rsa_public_key(key: KeyMaterial) -> rsa.RSAPublicKey:
    """
    Parse a PEM RSA public key.

    A PEM private key is accepted as well and its public half is returned.

    Raises:
        InvalidKeyError: "Not a public PEM key" if neither form parses or the key is not RSA
    """
    data = to_bytes(key)
    try:
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm):
        try:
            public_key = serialization.load_pem_private_key(data, password=None).public_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise InvalidKeyError("Not a public PEM key") from exc

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise InvalidKeyError("Not a public PEM key")
    return public_key
