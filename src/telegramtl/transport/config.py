"""Configuration for the mock transport."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MockTransportConfig:
    """Configuration for :class:`~telegramtl.transport.MockTransport`.

    Attributes:
        auth_key_id_length: Length of an auth key id in bytes (default 8,
            the size MTProto uses).
        auth_key_length: Length of an auth key body in bytes (default 256,
            i.e. a 2048-bit key).

    Examples:
        ```python
        from telegramtl.transport import MockTransport, MockTransportConfig

        # Short keys keep test fixtures readable
        transport = MockTransport(MockTransportConfig(auth_key_length=16))
        ```
    """

    auth_key_id_length: int = 8
    auth_key_length: int = 256

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.auth_key_id_length <= 0:
            raise ValueError(f"auth_key_id_length must be > 0, got {self.auth_key_id_length}")

        if self.auth_key_length <= 0:
            raise ValueError(f"auth_key_length must be > 0, got {self.auth_key_length}")
