"""Type builder: expands flat dotted-name declarations into a namespace tree.

This module defines the schema-layer interface consumed by the facade and the
default implementation bundled with telegramtl.

Design Pattern: Strategy Pattern
- SchemaLayer / TypeBuilder: abstract capabilities the facade depends on
- TypeLanguage / TreeTypeBuilder: default in-process implementation

One generic build routine serves both namespaces; the :class:`LeafKind`
passed in selects whether leaves become type or method definitions.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import AbstractSet, Mapping, Optional

from ..exceptions import SchemaError
from .description import Declaration
from .namespace import Definition, LeafKind, MethodDefinition, NamespaceNode, TypeDefinition

logger = logging.getLogger(__name__)

# Types every TL schema may reference without declaring them.
BUILTIN_TYPES = frozenset(
    {
        "int",
        "long",
        "double",
        "string",
        "bytes",
        "int128",
        "int256",
        "true",
        "#",
        "Bool",
        "X",
        "Type",
        "Object",
        "t",
    }
)

_VECTOR = re.compile(r"^[Vv]ector\s*<(.+)>$")


def referenced_type(type_name: str) -> str:
    """Reduce a parameter or result type to the bare type it depends on.

    Example:
        >>> referenced_type("flags.2?Vector<InputUser>")
        'InputUser'
    """
    name = type_name.strip()
    if "?" in name:
        name = name.split("?", 1)[1]
    name = name.lstrip("!%")

    match = _VECTOR.match(name)
    while match:
        name = match.group(1).strip().lstrip("%")
        match = _VECTOR.match(name)
    return name


class TypeBuilder(ABC):
    """Capability that turns flat declarations into a namespace tree."""

    @abstractmethod
    def build(
        self,
        declarations: Mapping[str, Declaration],
        root: NamespaceNode,
        kind: LeafKind,
        *,
        defined_types: Optional[AbstractSet[str]] = None,
    ) -> None:
        """Insert every declaration under ``root``, in place.

        Args:
            declarations: Declarations keyed by dotted name
            root: Namespace root to populate
            kind: Kind of definition to place at the leaves
            defined_types: Type names declarations may reference. When None,
                references are not checked.

        Raises:
            SchemaError: On name collisions or undefined type references
        """
        pass


class SchemaLayer(ABC):
    """Schema-layer capabilities required by the Telegram facade."""

    @property
    @abstractmethod
    def type_builder(self) -> TypeBuilder:
        """The type builder used to expand schema imports."""
        pass


class TreeTypeBuilder(TypeBuilder):
    """Builds namespaces by inserting each declaration along its split path.

    Intermediate branch nodes are created on demand, so declarations may come
    in any order.

    Example:
        >>> builder = TreeTypeBuilder()
        >>> root = NamespaceNode("Telegram.type")
        >>> builder.build({"foo.TypeFoo": ConstructorDeclaration()}, root, LeafKind.TYPE)
        >>> root.foo.TypeFoo.node_id
        'Telegram.type.foo.TypeFoo'
    """

    definition_classes: dict[LeafKind, type[Definition]] = {
        LeafKind.TYPE: TypeDefinition,
        LeafKind.SERVICE: MethodDefinition,
    }

    def __init__(self, builtin_types: AbstractSet[str] = BUILTIN_TYPES) -> None:
        self.builtin_types = frozenset(builtin_types)

    def build(
        self,
        declarations: Mapping[str, Declaration],
        root: NamespaceNode,
        kind: LeafKind,
        *,
        defined_types: Optional[AbstractSet[str]] = None,
    ) -> None:
        definition_class = self.definition_classes[kind]

        for name, declaration in declarations.items():
            segments = name.split(".")
            if not all(segments):
                raise SchemaError(f"Invalid declaration name '{name}': empty path segment")

            if defined_types is not None:
                self._check_references(name, declaration, kind, defined_types)

            node = root
            for segment in segments[:-1]:
                node = node.branch(segment)

            leaf = segments[-1]
            definition = definition_class(
                node_id=f"{node.node_id}.{leaf}",
                name=name,
                constructor_id=declaration.id,
                params=declaration.params,
                result_type=declaration.type,
            )
            node.add_leaf(leaf, definition)

        logger.debug(
            "Built %d %s declarations under '%s'", len(declarations), kind.value, root.node_id
        )

    def _check_references(
        self,
        name: str,
        declaration: Declaration,
        kind: LeafKind,
        defined_types: AbstractSet[str],
    ) -> None:
        """Ensure every type a declaration depends on is defined."""
        references = [(param.name, param.type) for param in declaration.params]
        # A constructor's own result type is what it defines.
        if kind is LeafKind.SERVICE and declaration.type:
            references.append(("result", declaration.type))

        for label, type_name in references:
            target = referenced_type(type_name)
            if target in self.builtin_types or target in defined_types:
                continue
            raise SchemaError(
                f"'{name}' references undefined type '{target}' (in {label}: {type_name})"
            )


class TypeLanguage(SchemaLayer):
    """Default schema layer backed by :class:`TreeTypeBuilder`."""

    def __init__(self, type_builder: Optional[TypeBuilder] = None) -> None:
        self._type_builder = type_builder if type_builder is not None else TreeTypeBuilder()

    @property
    def type_builder(self) -> TypeBuilder:
        return self._type_builder
