"""Configuration for the Telegram facade.

This module provides the configuration dataclass holding the defaults used by
:class:`telegramtl.Telegram` when a caller leaves an argument out.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TYPE_PREFIX = "Telegram.type"
DEFAULT_SERVICE_PREFIX = "Telegram.service"
DEFAULT_PASSWORD_SIZE = 128


@dataclass(frozen=True)
class TelegramConfig:
    """Defaults for schema import and password generation.

    Attributes:
        type_prefix: Namespace prefix for all schema constructors
            (default ``"Telegram.type"``).
        service_prefix: Namespace prefix for all schema methods
            (default ``"Telegram.service"``).
        password_size: Number of random bytes drawn by
            ``create_random_password()`` when no size is given (default 128).

    Examples:
        ```python
        from telegramtl import Telegram, TelegramConfig

        config = TelegramConfig(type_prefix="types", service_prefix="methods")
        tg = Telegram(transport, schema_layer, config)
        tg.import_schema(schema)

        tg.schema.type.node_id     # "types"
        tg.schema.service.node_id  # "methods"
        ```
    """

    type_prefix: str = DEFAULT_TYPE_PREFIX
    service_prefix: str = DEFAULT_SERVICE_PREFIX
    password_size: int = DEFAULT_PASSWORD_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.type_prefix:
            raise ValueError("type_prefix must be a non-empty string")

        if not self.service_prefix:
            raise ValueError("service_prefix must be a non-empty string")

        if self.password_size <= 0:
            raise ValueError(f"password_size must be > 0, got {self.password_size}")
