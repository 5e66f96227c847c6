"""
Unit tests for key material preparation.

Tests HMAC secret handling and RSA PEM parsing, including the refusal of
asymmetric keys as HMAC secrets.
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from jwtkit.core.errors import ErrorKind, InvalidKeyError
from jwtkit.core.keys import (
    hmac_secret,
    load_rsa_private_key,
    load_rsa_public_key,
    to_bytes,
)


class TestHmacSecret:
    def test_string_is_utf8_encoded(self):
        assert hmac_secret("sécret") == "sécret".encode("utf-8")

    def test_bytes_pass_through(self):
        assert hmac_secret(b"\x00\x01raw") == b"\x00\x01raw"

    def test_rejects_pem_public_key(self, rsa_public_pem):
        with pytest.raises(InvalidKeyError, match="asymmetric key"):
            hmac_secret(rsa_public_pem)

    def test_rejects_pem_private_key_bytes(self, rsa_private_pem):
        with pytest.raises(InvalidKeyError):
            hmac_secret(rsa_private_pem.encode())

    def test_rejects_openssh_public_key(self):
        with pytest.raises(InvalidKeyError):
            hmac_secret("ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQ user@host")

    def test_plain_secret_mentioning_begin_is_allowed(self):
        assert hmac_secret("BEGIN the secret") == b"BEGIN the secret"


class TestLoadRsaPrivateKey:
    def test_loads_pem_string(self, rsa_private_pem):
        assert isinstance(load_rsa_private_key(rsa_private_pem), rsa.RSAPrivateKey)

    def test_loads_pem_bytes(self, rsa_private_pem):
        assert isinstance(load_rsa_private_key(to_bytes(rsa_private_pem)), rsa.RSAPrivateKey)

    def test_public_key_is_not_private(self, rsa_public_pem):
        with pytest.raises(InvalidKeyError, match="Not a private PEM key"):
            load_rsa_private_key(rsa_public_pem)

    def test_garbage(self):
        with pytest.raises(InvalidKeyError, match="Not a private PEM key") as exc_info:
            load_rsa_private_key("not a key")
        assert exc_info.value.kind is ErrorKind.KEY_ERROR

    def test_non_rsa_key_rejected(self, ec_private_pem):
        with pytest.raises(InvalidKeyError, match="Not a private PEM key"):
            load_rsa_private_key(ec_private_pem)


class TestLoadRsaPublicKey:
    def test_loads_public_pem(self, rsa_public_pem):
        assert isinstance(load_rsa_public_key(rsa_public_pem), rsa.RSAPublicKey)

    def test_private_pem_yields_public_half(self, rsa_private_pem, rsa_private_key):
        public_key = load_rsa_public_key(rsa_private_pem)
        assert public_key.public_numbers() == rsa_private_key.public_key().public_numbers()

    def test_garbage(self):
        with pytest.raises(InvalidKeyError, match="Not a public PEM key"):
            load_rsa_public_key("secret")

    def test_non_rsa_key_rejected(self, ec_private_pem):
        with pytest.raises(InvalidKeyError, match="Not a public PEM key"):
            load_rsa_public_key(ec_private_pem)
