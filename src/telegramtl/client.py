"""Per-session API client."""

from __future__ import annotations

from .exceptions import SchemaError
from .schema import Definition, ImportedSchema, NamespaceNode, SchemaLayer
from .transport import TransportLayer


class Client:
    """A client bound to one imported schema and the two layers.

    Clients are created by :meth:`telegramtl.Telegram.create_client`. Each one
    keeps the ImportedSchema that was current when it was created; importing a
    new schema into the facade afterwards does not affect it.

    Attributes:
        schema: Imported schema snapshot
        transport: Transport layer used for network calls
        schema_layer: Schema layer used for serialization

    Example:
        >>> client = tg.create_client()
        >>> client.types.foo.TypeFoo.node_id
        'Telegram.type.foo.TypeFoo'
        >>> client.lookup_method("foo.callFoo").result_type
        'foo.Foo'
    """

    def __init__(
        self,
        schema: ImportedSchema,
        transport: TransportLayer,
        schema_layer: SchemaLayer,
    ) -> None:
        self.schema = schema
        self.transport = transport
        self.schema_layer = schema_layer

    @property
    def types(self) -> NamespaceNode:
        return self.schema.type

    @property
    def services(self) -> NamespaceNode:
        return self.schema.service

    def lookup_type(self, name: str) -> Definition:
        """Return the definition of constructor ``name``.

        Raises:
            SchemaError: If ``name`` is unknown or names a namespace
        """
        return self._definition(self.schema.resolve_type(name))

    def lookup_method(self, name: str) -> Definition:
        """Return the definition of method ``name``.

        Raises:
            SchemaError: If ``name`` is unknown or names a namespace
        """
        return self._definition(self.schema.resolve_method(name))

    @staticmethod
    def _definition(node: NamespaceNode) -> Definition:
        if node.definition is None:
            raise SchemaError(f"'{node.node_id}' is a namespace, not a declaration")
        return node.definition

    def __repr__(self) -> str:
        return (
            f"<Client types={self.schema.type.node_id!r} "
            f"services={self.schema.service.node_id!r}>"
        )
