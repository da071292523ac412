"""Mock transport layer for tests and tooling.

This module provides MockTransport, an in-process implementation of the
transport-layer capabilities. It does not speak MTProto; it gives the facade
something real to delegate to:

- A key store that validates and keeps hexadecimal RSA key material
- Auth keys that can be sealed with a password and restored (PyNaCl SecretBox)
- Hex buffer/string conversion and secure random buffers
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

import nacl.encoding
import nacl.hash
import nacl.utils
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from ..exceptions import DecryptionError, KeyMaterialError
from .config import MockTransportConfig
from .layer import AuthKeyFactory, KeyStore, TransportLayer, Utility

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def _parse_hex(label: str, value: Any) -> int:
    """Parse hexadecimal key material, with or without a ``0x`` prefix."""
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise KeyMaterialError(f"{label} must be non-negative, got {value}")
        return value
    if not isinstance(value, str):
        raise KeyMaterialError(f"{label} must be a hex string, got {type(value).__name__}")

    text = value[2:] if value.lower().startswith("0x") else value
    # int(text, 16) alone also accepts signs, underscores and whitespace
    if not _HEX_DIGITS.fullmatch(text):
        raise KeyMaterialError(f"{label} is not valid hex: {value!r}")
    return int(text, 16)


def _to_bytes(label: str, value: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise KeyMaterialError(f"{label} is not valid hex: {value!r}") from e
    raise KeyMaterialError(f"{label} must be bytes or a hex string, got {type(value).__name__}")


def _password_key(password: Union[str, bytes]) -> bytes:
    if isinstance(password, str):
        password = password.encode("utf-8")
    return nacl.hash.blake2b(
        password, digest_size=SecretBox.KEY_SIZE, encoder=nacl.encoding.RawEncoder
    )


@dataclass(frozen=True)
class PublicKeyRecord:
    """A validated server public key."""

    fingerprint: int
    modulus: int
    exponent: int


class MockKeyStore(KeyStore):
    """Keeps trusted public keys indexed by fingerprint.

    Examples:
        ```python
        store = MockKeyStore()
        store.add_key(fingerprint="0xAB", modulus="c150023e", exponent="010001")
        assert "0xab" in store
        ```
    """

    def __init__(self) -> None:
        self._keys: dict[int, PublicKeyRecord] = {}

    def add_key(self, *, fingerprint: Any, modulus: Any, exponent: Any) -> None:
        """Validate and store a public key.

        Raises:
            KeyMaterialError: If any part is not hexadecimal or the modulus is zero
        """
        record = PublicKeyRecord(
            fingerprint=_parse_hex("fingerprint", fingerprint),
            modulus=_parse_hex("modulus", modulus),
            exponent=_parse_hex("exponent", exponent),
        )
        if record.modulus == 0:
            raise KeyMaterialError("modulus must be non-zero")

        self._keys[record.fingerprint] = record
        logger.debug("Added public key with fingerprint %#x", record.fingerprint)

    def get_key(self, fingerprint: Any) -> Optional[PublicKeyRecord]:
        return self._keys.get(_parse_hex("fingerprint", fingerprint))

    def __contains__(self, fingerprint: object) -> bool:
        return self.get_key(fingerprint) is not None

    def __len__(self) -> int:
        return len(self._keys)


@dataclass(frozen=True)
class AuthKey:
    """An auth key as negotiated with a server.

    Attributes:
        key_id: Auth key id
        value: Auth key body
    """

    key_id: bytes
    value: bytes

    def encrypt(self, password: Union[str, bytes]) -> bytes:
        """Seal id and body with a password-derived key.

        The result can be stored and later restored with
        ``MockAuthKeyFactory.decrypt(buffer, password)``.
        """
        box = SecretBox(_password_key(password))
        return bytes(box.encrypt(self.key_id + self.value))


class MockAuthKeyFactory(AuthKeyFactory):
    """Creates and restores :class:`AuthKey` instances."""

    def __init__(self, config: MockTransportConfig) -> None:
        self.config = config

    def create(self, auth_key_id: Any, body: Any) -> AuthKey:
        """Create an auth key from bytes or hex strings.

        Raises:
            KeyMaterialError: If id or body is malformed or has the wrong length
        """
        key_id = _to_bytes("auth_key_id", auth_key_id)
        value = _to_bytes("body", body)

        if len(key_id) != self.config.auth_key_id_length:
            raise KeyMaterialError(
                f"auth_key_id must be {self.config.auth_key_id_length} bytes, got {len(key_id)}"
            )
        if len(value) != self.config.auth_key_length:
            raise KeyMaterialError(
                f"body must be {self.config.auth_key_length} bytes, got {len(value)}"
            )

        return AuthKey(key_id=key_id, value=value)

    def decrypt(self, buffer: Any, password: Union[str, bytes]) -> AuthKey:
        """Restore an auth key sealed by :meth:`AuthKey.encrypt`.

        Raises:
            DecryptionError: On a wrong password or a corrupted buffer
        """
        box = SecretBox(_password_key(password))
        try:
            plaintext = box.decrypt(bytes(buffer))
        except (CryptoError, ValueError, TypeError) as e:
            raise DecryptionError(f"Cannot decrypt auth key: {e}") from e

        expected = self.config.auth_key_id_length + self.config.auth_key_length
        if len(plaintext) != expected:
            raise DecryptionError(
                f"Decrypted auth key has {len(plaintext)} bytes, expected {expected}"
            )

        split = self.config.auth_key_id_length
        return AuthKey(key_id=plaintext[:split], value=plaintext[split:])


class MockUtility(Utility):
    """Hexadecimal conversions and random buffers."""

    def string_to_buffer(self, string: str, length: int) -> bytes:
        """Convert a hex string into a buffer of exactly ``length`` bytes.

        Shorter values are left-padded with zero bytes.

        Raises:
            ValueError: If ``string`` is not hex or does not fit in ``length`` bytes
        """
        text = string[2:] if string.lower().startswith("0x") else string
        if len(text) % 2:
            text = "0" + text

        data = bytes.fromhex(text)
        if len(data) > length:
            raise ValueError(f"'{string}' needs {len(data)} bytes, more than {length}")
        return data.rjust(length, b"\x00")

    def buffer_to_string(self, buffer: bytes, length: Optional[int] = None) -> str:
        """Convert the first ``length`` bytes of a buffer (all when None) to hex."""
        data = bytes(buffer)
        if length is not None:
            if length < 0:
                raise ValueError(f"length must be >= 0, got {length}")
            data = data[:length]
        return data.hex()

    def create_random_buffer(self, size: int) -> bytes:
        """Return ``size`` cryptographically secure random bytes."""
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        return nacl.utils.random(size)


class MockTransport(TransportLayer):
    """In-process transport layer.

    Attributes:
        config: Mock transport configuration

    Examples:
        ```python
        from telegramtl.transport import MockTransport

        transport = MockTransport()
        key = transport.auth.create(b"\\x01" * 8, b"\\x02" * 256)
        sealed = key.encrypt("password")
        assert transport.auth.decrypt(sealed, "password") == key
        ```
    """

    def __init__(self, config: Optional[MockTransportConfig] = None) -> None:
        self.config = config if config is not None else MockTransportConfig()
        self._key_store = MockKeyStore()
        self._auth = MockAuthKeyFactory(self.config)
        self._utility = MockUtility()

    @property
    def key_store(self) -> MockKeyStore:
        return self._key_store

    @property
    def auth(self) -> MockAuthKeyFactory:
        return self._auth

    @property
    def utility(self) -> MockUtility:
        return self._utility
