"""Schema import: flat description in, two prefixed namespace trees out.

The default Telegram API schema can be downloaded from
https://core.telegram.org/schema. Prefixes are put in front of every declared
name, so after an import a ``foo.TypeFoo`` constructor and a ``foo.callFoo``
method are addressed as::

    schema.type.foo.TypeFoo        # node_id "Telegram.type.foo.TypeFoo"
    schema.service.foo.callFoo     # node_id "Telegram.service.foo.callFoo"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..config import DEFAULT_SERVICE_PREFIX, DEFAULT_TYPE_PREFIX
from ..exceptions import SchemaError
from .builder import SchemaLayer
from .description import SchemaDescription
from .namespace import LeafKind, NamespaceNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportedSchema:
    """Result of one schema import.

    Both roots are frozen on creation, so an ImportedSchema can be shared
    with any number of clients without being affected by later imports.

    Attributes:
        type: Root of the constructor namespace
        service: Root of the method namespace
    """

    type: NamespaceNode
    service: NamespaceNode

    def __post_init__(self) -> None:
        self.type.freeze()
        self.service.freeze()

    @property
    def type_count(self) -> int:
        return sum(1 for _ in self.type.leaves())

    @property
    def method_count(self) -> int:
        return sum(1 for _ in self.service.leaves())

    def resolve_type(self, name: str) -> NamespaceNode:
        """Look up a constructor by its declared dotted name."""
        return self.type.resolve(name)

    def resolve_method(self, name: str) -> NamespaceNode:
        """Look up a method by its declared dotted name."""
        return self.service.resolve(name)


def _check_prefix(label: str, prefix: Any) -> None:
    if not isinstance(prefix, str) or not prefix:
        raise SchemaError(f"{label} must be a non-empty string, got {prefix!r}")
    if not all(prefix.split(".")):
        raise SchemaError(f"{label} '{prefix}' contains an empty path segment")


def import_schema(
    description: Union[SchemaDescription, Any],
    schema_layer: SchemaLayer,
    type_prefix: str = DEFAULT_TYPE_PREFIX,
    service_prefix: str = DEFAULT_SERVICE_PREFIX,
    *,
    check_types: bool = True,
) -> ImportedSchema:
    """Build the ``type`` and ``service`` namespaces for a schema description.

    Args:
        description: SchemaDescription, or a raw mapping with ``constructors``
            and ``methods``
        schema_layer: Schema layer whose type builder expands the declarations
        type_prefix: Prefix for all constructors
        service_prefix: Prefix for all methods
        check_types: Reject declarations that reference undefined types

    Returns:
        ImportedSchema with both roots populated and frozen

    Raises:
        SchemaError: If the description is malformed, a prefix is invalid, or
            the type builder rejects a declaration

    Example:
        >>> schema = import_schema(
        ...     {"constructors": {"foo.TypeFoo": {}}, "methods": {"foo.callFoo": {}}},
        ...     TypeLanguage(),
        ... )
        >>> schema.type.foo.TypeFoo.node_id
        'Telegram.type.foo.TypeFoo'
    """
    description = SchemaDescription.from_object(description)
    _check_prefix("type_prefix", type_prefix)
    _check_prefix("service_prefix", service_prefix)

    builder = schema_layer.type_builder
    defined_types = description.defined_types() if check_types else None

    type_root = NamespaceNode(type_prefix)
    builder.build(description.constructors, type_root, LeafKind.TYPE, defined_types=defined_types)

    service_root = NamespaceNode(service_prefix)
    builder.build(description.methods, service_root, LeafKind.SERVICE, defined_types=defined_types)

    schema = ImportedSchema(type=type_root, service=service_root)
    logger.info(
        "Imported schema: %d types under '%s', %d methods under '%s'",
        schema.type_count,
        type_prefix,
        schema.method_count,
        service_prefix,
    )
    return schema


def load_schema(path: Union[str, Path]) -> SchemaDescription:
    """Read a JSON schema file.

    Both Telegram's published layout (lists of declarations named by
    ``predicate``/``method``) and the mapping layout are accepted.

    Raises:
        SchemaError: If the file cannot be read or is not a valid description
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SchemaError(f"Cannot read schema file {path}: {e}") from e

    logger.debug("Loaded %d bytes of schema from %s", len(data), path)
    return SchemaDescription.from_json(data)
