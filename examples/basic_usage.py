"""Basic usage example for telegramtl.

This example demonstrates:
1. Importing a schema into prefixed namespaces
2. Creating clients bound to the imported schema
3. Registering a public key and storing an auth key
"""

from __future__ import annotations

from telegramtl import Telegram, TypeLanguage
from telegramtl.transport import MockTransport, MockTransportConfig

SCHEMA = {
    "constructors": [
        {"id": "-1720552011", "predicate": "boolTrue", "params": [], "type": "Bool"},
        {"id": "1648543603", "predicate": "inputPeerSelf", "params": [], "type": "InputPeer"},
        {
            "id": "-1885878744",
            "predicate": "help.config",
            "params": [{"name": "date", "type": "int"}],
            "type": "help.Config",
        },
    ],
    "methods": [
        {"id": "-990308245", "method": "help.getConfig", "params": [], "type": "help.Config"},
        {
            "id": "-1895457764",
            "method": "messages.sendMessage",
            "params": [
                {"name": "peer", "type": "InputPeer"},
                {"name": "message", "type": "string"},
            ],
            "type": "Bool",
        },
    ],
}


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("telegramtl Basic Usage Example")
    print("=" * 60)

    transport = MockTransport(MockTransportConfig(auth_key_length=32))
    tg = Telegram(transport, TypeLanguage())

    # 1. Import the schema
    schema = tg.import_schema(SCHEMA)
    print(f"\n1. Imported {schema.type_count} types and {schema.method_count} methods")
    print(f"   Type root:    {schema.type.node_id}")
    print(f"   Service root: {schema.service.node_id}")

    # 2. Create a client and look up declarations
    client = tg.create_client()
    send = client.services.messages.sendMessage
    print(f"\n2. {send.node_id}")
    for param in send.definition.params:
        print(f"   {param.name}: {param.type}")
    print(f"   -> {send.definition.result_type}")

    # 3. Keys
    tg.add_public_key(
        {"fingerprint": "0xc3b42b026ce86b21", "modulus": "c150023e2f70db79", "exponent": "010001"}
    )
    auth_key = tg.create_auth_key(
        tg.string_to_buffer("0102030405060708", 8),
        tg.string_to_buffer("ab" * 32, 32),
    )
    password = tg.create_random_password()
    sealed = auth_key.encrypt(password)
    restored = tg.decrypt_key(sealed, password)
    print(f"\n3. Sealed auth key: {len(sealed)} bytes")
    print(f"   Restored key id: {tg.buffer_to_string(restored.key_id)}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
