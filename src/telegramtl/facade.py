"""Main Telegram facade.

An instance of :class:`Telegram` is built once from a transport layer and a
schema layer. It imports a schema and hands out clients that perform the API
calls; key management and utility operations are forwarded to the transport
layer untouched.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .client import Client
from .config import TelegramConfig
from .exceptions import ConstructionError, NotInitializedError
from .schema import ImportedSchema, SchemaDescription, SchemaLayer, import_schema
from .transport import TransportLayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicKey:
    """Description of a trusted server public key.

    Values are forwarded to the transport layer's key store exactly as given.
    """

    fingerprint: Any
    modulus: Any
    exponent: Any

    @classmethod
    def from_mapping(cls, key: Mapping[str, Any]) -> PublicKey:
        return cls(
            fingerprint=key["fingerprint"],
            modulus=key["modulus"],
            exponent=key["exponent"],
        )


class Telegram:
    """Entry point: imports schemas and creates clients.

    Attributes:
        transport: Transport layer (wire protocol, cryptography)
        schema_layer: Schema layer (type builder, serialization)
        config: Defaults for prefixes and password size

    Examples:
        ```python
        from telegramtl import Telegram, TypeLanguage
        from telegramtl.transport import MockTransport

        tg = Telegram(MockTransport(), TypeLanguage())
        tg.import_schema({
            "constructors": {"foo.TypeFoo": {"type": "foo.Foo"}},
            "methods": {"foo.callFoo": {"type": "foo.Foo"}},
        })

        client = tg.create_client()
        client.types.foo.TypeFoo       # Telegram.type.foo.TypeFoo
        client.services.foo.callFoo    # Telegram.service.foo.callFoo
        ```
    """

    def __init__(
        self,
        transport: TransportLayer,
        schema_layer: SchemaLayer,
        config: Optional[TelegramConfig] = None,
    ) -> None:
        if transport is None or schema_layer is None:
            raise ConstructionError("You must create Telegram(transport, schema_layer)")

        self.transport = transport
        self.schema_layer = schema_layer
        self.config = config if config is not None else TelegramConfig()
        self._schema: Optional[ImportedSchema] = None
        # Guards _schema between import_schema() and create_client()
        self._lock = threading.Lock()

    @property
    def schema(self) -> Optional[ImportedSchema]:
        """The most recently imported schema, or None before the first import."""
        return self._schema

    def import_schema(
        self,
        description: Union[SchemaDescription, Mapping[str, Any]],
        type_prefix: Optional[str] = None,
        service_prefix: Optional[str] = None,
        *,
        check_types: bool = True,
    ) -> ImportedSchema:
        """Import a schema, replacing any previously imported one.

        The prefixes are added in front of all types and methods declared in
        the schema. When omitted they default to ``config.type_prefix`` and
        ``config.service_prefix`` (``"Telegram.type"``/``"Telegram.service"``).

        Args:
            description: Schema description with ``constructors`` and ``methods``
            type_prefix: Prefix for all schema types
            service_prefix: Prefix for all schema methods
            check_types: Reject declarations referencing undefined types

        Returns:
            The new ImportedSchema, also available as ``self.schema``

        Raises:
            SchemaError: If the description is invalid. The previously
                imported schema is kept.
        """
        if type_prefix is None:
            type_prefix = self.config.type_prefix
        if service_prefix is None:
            service_prefix = self.config.service_prefix

        with self._lock:
            schema = import_schema(
                description,
                self.schema_layer,
                type_prefix,
                service_prefix,
                check_types=check_types,
            )
            self._schema = schema
        return schema

    def create_client(self) -> Client:
        """Create a new client to interact with the API.

        Raises:
            NotInitializedError: If no schema has been imported yet
        """
        with self._lock:
            schema = self._schema

        if schema is None:
            raise NotInitializedError("Call import_schema() before create_client()")

        logger.debug("Creating client for schema '%s'", schema.type.node_id)
        return Client(schema, self.transport, self.schema_layer)

    def add_public_key(self, key: Union[PublicKey, Mapping[str, Any]]) -> None:
        """Add a server public key to the transport layer's key store.

        Example:
            >>> tg.add_public_key({
            ...     "fingerprint": "0xc3b42b026ce86b21",
            ...     "modulus": "c150023e2f70db79...",
            ...     "exponent": "010001",
            ... })
        """
        if not isinstance(key, PublicKey):
            key = PublicKey.from_mapping(key)

        logger.debug("Adding public key %s", key.fingerprint)
        self.transport.key_store.add_key(
            fingerprint=key.fingerprint,
            modulus=key.modulus,
            exponent=key.exponent,
        )

    def create_auth_key(self, auth_key_id: Any, body: Any) -> Any:
        """Create an auth key from the id and payload returned by a server
        during key exchange."""
        return self.transport.auth.create(auth_key_id, body)

    def decrypt_key(self, buffer: Any, password: str) -> Any:
        """Decrypt an auth key buffer, usually produced by ``auth_key.encrypt(password)``.

        Example:
            >>> sealed = auth_key.encrypt("password")
            >>> key = tg.decrypt_key(sealed, "password")
        """
        return self.transport.auth.decrypt(buffer, password)

    def string_to_buffer(self, string: str, length: int) -> Any:
        return self.transport.utility.string_to_buffer(string, length)

    def buffer_to_string(self, buffer: Any, length: Optional[int] = None) -> str:
        return self.transport.utility.buffer_to_string(buffer, length)

    def create_random_password(self, size: Optional[int] = None) -> str:
        """Create a random string, e.g. to encrypt an auth key with.

        Args:
            size: Number of random bytes (default ``config.password_size``, 128)
        """
        if size is None:
            size = self.config.password_size

        utility = self.transport.utility
        buffer = utility.create_random_buffer(size)
        return utility.buffer_to_string(buffer)
