"""Exception hierarchy for telegramtl.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TelegramTLError for easy catching of any
telegramtl-specific error.

Errors raised by a real transport or schema layer are never wrapped: they reach
the caller exactly as the layer raised them.
"""

from __future__ import annotations


class TelegramTLError(Exception):
    """Base exception for all telegramtl errors."""

    pass


class ConstructionError(TelegramTLError):
    """Raised when the Telegram facade is built without its layers.

    Examples:
        - Transport layer reference is None
        - Schema layer reference is None
    """

    pass


class SchemaError(TelegramTLError):
    """Raised when a schema description is invalid or conflicting.

    Examples:
        - Description is missing ``constructors`` or ``methods``
        - A declared name collides with a leaf already occupying that path
        - A declaration references an undefined type
        - Empty namespace prefix or empty path segment
    """

    pass


class NotInitializedError(TelegramTLError):
    """Raised when a client is requested before any schema was imported."""

    pass


class TransportError(TelegramTLError):
    """Base exception for errors raised by the bundled mock transport."""

    pass


class KeyMaterialError(TransportError):
    """Raised when key material is malformed.

    Examples:
        - Fingerprint, modulus or exponent is not hexadecimal
        - Auth key id or body has the wrong length
    """

    pass


class DecryptionError(TransportError):
    """Raised when an encrypted auth key cannot be decrypted.

    Examples:
        - Wrong password
        - Truncated or corrupted buffer
    """

    pass
