"""Namespace tree produced by a schema import.

Each node carries ``node_id``, its fully-qualified dotted path. Branch nodes
hold child nodes keyed by path segment; leaf nodes hold a resolved
:class:`TypeDefinition` or :class:`MethodDefinition`. Children are reachable by
attribute or item access, so ``schema.type.foo.TypeFoo`` and
``schema.type["foo"]["TypeFoo"]`` address the same node. Members whose names
clash with a node attribute (``children``, ``resolve``, ...) are reachable by
item access only.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Iterator, Mapping, Optional, Tuple

from ..exceptions import SchemaError
from .description import ParamDeclaration


class LeafKind(enum.Enum):
    """Which kind of definition a namespace's leaves hold."""

    TYPE = "type"
    SERVICE = "service"


@dataclass(frozen=True)
class Definition:
    """A resolved declaration placed at a leaf.

    Attributes:
        node_id: Fully-qualified dotted path of the leaf
        name: Declared dotted name, without prefix
        constructor_id: Numeric id from the schema, if any
        params: Ordered parameters
        result_type: Result type name, if declared
    """

    kind: ClassVar[LeafKind]

    node_id: str
    name: str
    constructor_id: Optional[int]
    params: Tuple[ParamDeclaration, ...]
    result_type: Optional[str]


@dataclass(frozen=True)
class TypeDefinition(Definition):
    """A constructor resolved under the ``type`` namespace."""

    kind: ClassVar[LeafKind] = LeafKind.TYPE


@dataclass(frozen=True)
class MethodDefinition(Definition):
    """A method resolved under the ``service`` namespace."""

    kind: ClassVar[LeafKind] = LeafKind.SERVICE


class NamespaceNode:
    """A branch or leaf of a namespace tree.

    Example:
        >>> root = NamespaceNode("Telegram.type")
        >>> foo = root.branch("foo")
        >>> foo.node_id
        'Telegram.type.foo'
    """

    def __init__(self, node_id: str, definition: Optional[Definition] = None) -> None:
        self.node_id = node_id
        self.definition = definition
        self._children: dict[str, NamespaceNode] = {}
        self._frozen = False

    @property
    def is_leaf(self) -> bool:
        return self.definition is not None

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def children(self) -> Mapping[str, NamespaceNode]:
        """Read-only view of the child nodes keyed by segment."""
        return MappingProxyType(self._children)

    def _child_id(self, key: str) -> str:
        if not key:
            raise SchemaError(f"Empty path segment under '{self.node_id}'")
        return f"{self.node_id}.{key}"

    def _check_mutable(self) -> None:
        if self._frozen:
            raise SchemaError(f"Namespace '{self.node_id}' is frozen")
        if self.is_leaf:
            raise SchemaError(f"'{self.node_id}' is a leaf and cannot hold children")

    def branch(self, key: str) -> NamespaceNode:
        """Return the branch child ``key``, creating it on demand.

        Raises:
            SchemaError: If ``key`` is already occupied by a leaf
        """
        existing = self._children.get(key)
        if existing is not None:
            if existing.is_leaf:
                raise SchemaError(
                    f"'{existing.node_id}' is already declared and cannot be used as a namespace"
                )
            return existing

        self._check_mutable()
        node = NamespaceNode(self._child_id(key))
        self._children[key] = node
        return node

    def add_leaf(self, key: str, definition: Definition) -> NamespaceNode:
        """Insert a leaf child holding ``definition``.

        Raises:
            SchemaError: If ``key`` is already occupied by a branch or a leaf
        """
        self._check_mutable()
        existing = self._children.get(key)
        if existing is not None:
            what = "declared" if existing.is_leaf else "a namespace"
            raise SchemaError(f"'{existing.node_id}' is already {what}")

        node = NamespaceNode(self._child_id(key), definition)
        self._children[key] = node
        return node

    def freeze(self) -> None:
        """Make this node and all of its descendants immutable."""
        for node in self.walk():
            object.__setattr__(node, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        if self.__dict__.get("_frozen", False):
            raise SchemaError(f"Namespace '{self.node_id}' is frozen; cannot set '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if self.__dict__.get("_frozen", False):
            raise SchemaError(f"Namespace '{self.node_id}' is frozen; cannot delete '{name}'")
        object.__delattr__(self, name)

    def resolve(self, path: str) -> NamespaceNode:
        """Find the descendant at dotted ``path``.

        Raises:
            SchemaError: If any segment is missing
        """
        node = self
        for segment in path.split("."):
            child = node._children.get(segment)
            if child is None:
                raise SchemaError(f"'{path}' not found under '{self.node_id}'")
            node = child
        return node

    def walk(self) -> Iterator[NamespaceNode]:
        """Iterate over this node and all descendants, depth first."""
        yield self
        for child in self._children.values():
            yield from child.walk()

    def leaves(self) -> Iterator[NamespaceNode]:
        return (node for node in self.walk() if node.is_leaf)

    def __getattr__(self, name: str) -> NamespaceNode:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._children[name]
        except KeyError:
            raise AttributeError(f"'{self.node_id}' has no member '{name}'") from None

    def __getitem__(self, key: str) -> NamespaceNode:
        return self._children[key]

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"<NamespaceNode leaf {self.node_id}>"
        return f"<NamespaceNode {self.node_id} ({len(self._children)} members)>"
