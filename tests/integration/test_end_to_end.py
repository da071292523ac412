"""End-to-end integration tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from telegramtl import (
    DecryptionError,
    KeyMaterialError,
    SchemaError,
    Telegram,
    TypeLanguage,
    load_schema,
)
from telegramtl.transport import MockTransport


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_schema_file_to_client(
        self, tmp_path: Path, telegram_json_schema: dict[str, Any]
    ) -> None:
        """Test loading schema.json, importing it and using a client."""
        # 1. Write and load the published schema layout
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(telegram_json_schema))
        description = load_schema(path)

        # 2. Import it with custom prefixes
        tg = Telegram(MockTransport(), TypeLanguage())
        schema = tg.import_schema(description, "types", "methods")
        assert schema.type_count == 4
        assert schema.method_count == 2

        # 3. Create a client and resolve declarations
        client = tg.create_client()
        send = client.services.messages.sendMessage
        assert send.node_id == "methods.messages.sendMessage"
        assert send.definition.constructor_id == -1895457764
        assert [p.name for p in send.definition.params] == [
            "flags",
            "no_webpage",
            "peer",
            "message",
        ]
        assert client.types.help.config.node_id == "types.help.config"
        assert client.lookup_method("help.getConfig").result_type == "help.Config"

    def test_reimport_does_not_affect_existing_clients(
        self, sample_schema: dict[str, Any], telegram_json_schema: dict[str, Any]
    ) -> None:
        """Test two clients from two imports see their own schema."""
        tg = Telegram(MockTransport(), TypeLanguage())

        tg.import_schema(sample_schema)
        first = tg.create_client()
        tg.import_schema(telegram_json_schema)
        second = tg.create_client()

        assert "foo" in first.services and "messages" not in first.services
        assert "messages" in second.services and "foo" not in second.services

        # A failed import leaves the facade on the last good schema
        with pytest.raises(SchemaError):
            tg.import_schema({"constructors": {}, "methods": None})
        assert "messages" in tg.create_client().services

    def test_auth_key_storage_workflow(self, transport: MockTransport) -> None:
        """Test create, encrypt with a random password, and decrypt an auth key."""
        tg = Telegram(transport, TypeLanguage())

        # 1. Public keys go to the transport's key store
        tg.add_public_key(
            {"fingerprint": "0xc3b42b026ce86b21", "modulus": "c150023e2f70db79", "exponent": "010001"}
        )
        assert "0xc3b42b026ce86b21" in transport.key_store

        # 2. Create the auth key from the values a key exchange returns
        key_id = tg.string_to_buffer("0102030405060708", 8)
        body = tg.string_to_buffer("ab" * 16, 16)
        auth_key = tg.create_auth_key(key_id, body)
        assert tg.buffer_to_string(auth_key.key_id) == "0102030405060708"

        # 3. Seal it with a random password and restore it
        password = tg.create_random_password()
        assert len(password) == 256
        sealed = auth_key.encrypt(password)
        assert tg.decrypt_key(sealed, password) == auth_key

        with pytest.raises(DecryptionError):
            tg.decrypt_key(sealed, tg.create_random_password(16))

    def test_transport_errors_reach_caller(self, transport: MockTransport) -> None:
        """Test key material errors pass through the facade unchanged."""
        tg = Telegram(transport, TypeLanguage())

        with pytest.raises(KeyMaterialError, match="fingerprint is not valid hex"):
            tg.add_public_key({"fingerprint": "0xZZ", "modulus": "ff", "exponent": "3"})

        with pytest.raises(KeyMaterialError, match="auth_key_id must be 8 bytes"):
            tg.create_auth_key(b"\x01", b"\x02" * 16)
