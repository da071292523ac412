"""Transport-layer interface for telegramtl.

The facade depends only on the abstract capabilities in
:mod:`telegramtl.transport.layer`. :class:`MockTransport` implements them in
process, for tests and command-line tooling.
"""

from __future__ import annotations

from .config import MockTransportConfig
from .layer import AuthKeyFactory, KeyStore, TransportLayer, Utility
from .mock import AuthKey, MockAuthKeyFactory, MockKeyStore, MockTransport, MockUtility, PublicKeyRecord

__all__ = [
    "TransportLayer",
    "KeyStore",
    "AuthKeyFactory",
    "Utility",
    "MockTransport",
    "MockTransportConfig",
    "MockKeyStore",
    "MockAuthKeyFactory",
    "MockUtility",
    "AuthKey",
    "PublicKeyRecord",
]
