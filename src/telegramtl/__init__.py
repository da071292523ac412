"""telegramtl: Telegram Type Language schemas and clients

A Python library that loads Telegram's Type Language schema into prefixed
namespaces and hands out API clients bound to it. The wire protocol and its
cryptography stay in a pluggable transport layer; type resolution lives in a
pluggable schema layer.

Key Features:
- Pydantic-validated schema descriptions (mapping or schema.json layout)
- Independent ``type`` and ``service`` namespaces under configurable prefixes
- Clients that keep the schema they were created with
- Swappable transport and schema layers

Quick Start:
    >>> from telegramtl import Telegram, TypeLanguage, load_schema
    >>> from telegramtl.transport import MockTransport
    >>>
    >>> tg = Telegram(MockTransport(), TypeLanguage())
    >>> tg.import_schema(load_schema("schema.json"))
    >>> client = tg.create_client()
    >>> client.services.messages.sendMessage.node_id
    'Telegram.service.messages.sendMessage'
"""

from __future__ import annotations

from .client import Client
from .config import TelegramConfig
from .exceptions import (
    ConstructionError,
    DecryptionError,
    KeyMaterialError,
    NotInitializedError,
    SchemaError,
    TelegramTLError,
    TransportError,
)
from .facade import PublicKey, Telegram
from .schema import (
    ImportedSchema,
    LeafKind,
    MethodDefinition,
    NamespaceNode,
    SchemaDescription,
    SchemaLayer,
    TypeDefinition,
    TypeLanguage,
    import_schema,
    load_schema,
)
from .transport import TransportLayer

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Telegram",
    "Client",
    "TelegramConfig",
    "PublicKey",
    # Schema
    "SchemaDescription",
    "ImportedSchema",
    "NamespaceNode",
    "LeafKind",
    "TypeDefinition",
    "MethodDefinition",
    "import_schema",
    "load_schema",
    # Layers
    "SchemaLayer",
    "TypeLanguage",
    "TransportLayer",
    # Exceptions
    "TelegramTLError",
    "ConstructionError",
    "SchemaError",
    "NotInitializedError",
    "TransportError",
    "KeyMaterialError",
    "DecryptionError",
    # Version
    "__version__",
]
