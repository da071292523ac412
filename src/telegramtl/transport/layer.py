"""Abstract interface for the transport layer.

The facade never talks to a concrete transport implementation; it only uses
the three capabilities defined here. This keeps the wire protocol and its
cryptography outside of telegramtl and lets tests substitute any of them.

Design Pattern: Strategy Pattern / Adapter Pattern
- TransportLayer: Abstract interface grouping the capabilities
- MockTransport: In-process implementation (testing, tooling)
- Adapters around a real MTProto implementation (provided by the caller)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class KeyStore(ABC):
    """Store of trusted server public keys."""

    @abstractmethod
    def add_key(self, *, fingerprint: Any, modulus: Any, exponent: Any) -> None:
        """Register a server public key.

        Args:
            fingerprint: Key fingerprint, e.g. ``"0xc3b42b026ce86b21"``
            modulus: RSA modulus
            exponent: RSA public exponent, e.g. ``"010001"``
        """
        pass


class AuthKeyFactory(ABC):
    """Construction and decryption of auth keys."""

    @abstractmethod
    def create(self, auth_key_id: Any, body: Any) -> Any:
        """Create an auth key from the id and payload negotiated during key exchange."""
        pass

    @abstractmethod
    def decrypt(self, buffer: Any, password: str) -> Any:
        """Restore an auth key from a buffer produced by encrypting it with ``password``."""
        pass


class Utility(ABC):
    """Buffer/string conversion and random data."""

    @abstractmethod
    def string_to_buffer(self, string: str, length: int) -> bytes:
        pass

    @abstractmethod
    def buffer_to_string(self, buffer: bytes, length: Optional[int] = None) -> str:
        pass

    @abstractmethod
    def create_random_buffer(self, size: int) -> bytes:
        pass


class TransportLayer(ABC):
    """Transport-layer capabilities required by the Telegram facade.

    Examples:
        ```python
        from telegramtl import Telegram, TypeLanguage
        from telegramtl.transport import MockTransport

        tg = Telegram(MockTransport(), TypeLanguage())
        tg.add_public_key({
            "fingerprint": "0xc3b42b026ce86b21",
            "modulus": "c150023e2f70db79...",
            "exponent": "010001",
        })
        ```
    """

    @property
    @abstractmethod
    def key_store(self) -> KeyStore:
        pass

    @property
    @abstractmethod
    def auth(self) -> AuthKeyFactory:
        pass

    @property
    @abstractmethod
    def utility(self) -> Utility:
        pass
