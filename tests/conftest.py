"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from telegramtl import Telegram, TypeLanguage
from telegramtl.transport import MockTransport, MockTransportConfig


@pytest.fixture
def sample_schema() -> dict[str, Any]:
    """Mapping-layout schema with a nested namespace and one top-level type."""
    return {
        "constructors": {
            "foo.TypeFoo": {"id": "-1132882121", "type": "foo.Foo"},
            "foo.bar.TypeBar": {
                "id": 1,
                "params": [{"name": "flags", "type": "#"}, {"name": "foo", "type": "foo.Foo"}],
                "type": "foo.Bar",
            },
            "User": {"id": 2, "params": [{"name": "id", "type": "long"}], "type": "User"},
        },
        "methods": {
            "foo.callFoo": {"id": 3, "type": "foo.Foo"},
            "foo.bar.callBar": {
                "id": 4,
                "params": [{"name": "users", "type": "Vector<User>"}],
                "type": "foo.Bar",
            },
        },
    }


@pytest.fixture
def telegram_json_schema() -> dict[str, Any]:
    """List-layout schema, as published at core.telegram.org/schema/json."""
    return {
        "constructors": [
            {"id": "-1720552011", "predicate": "boolTrue", "params": [], "type": "Bool"},
            {"id": "1072550713", "predicate": "true", "params": [], "type": "True"},
            {
                "id": "-1885878744",
                "predicate": "help.config",
                "params": [{"name": "flags", "type": "#"}, {"name": "date", "type": "int"}],
                "type": "help.Config",
            },
            {
                "id": "1648543603",
                "predicate": "inputPeerSelf",
                "params": [],
                "type": "InputPeer",
            },
        ],
        "methods": [
            {"id": "-990308245", "method": "help.getConfig", "params": [], "type": "help.Config"},
            {
                "id": "-1895457764",
                "method": "messages.sendMessage",
                "params": [
                    {"name": "flags", "type": "#"},
                    {"name": "no_webpage", "type": "flags.1?true"},
                    {"name": "peer", "type": "InputPeer"},
                    {"name": "message", "type": "string"},
                ],
                "type": "Bool",
            },
        ],
    }


@pytest.fixture
def transport() -> MockTransport:
    """Mock transport with short auth keys."""
    return MockTransport(MockTransportConfig(auth_key_id_length=8, auth_key_length=16))


@pytest.fixture
def schema_layer() -> TypeLanguage:
    return TypeLanguage()


@pytest.fixture
def telegram(transport: MockTransport, schema_layer: TypeLanguage) -> Telegram:
    """Facade over the mock transport and the default schema layer."""
    return Telegram(transport, schema_layer)
