"""Unit tests for namespace nodes."""

from __future__ import annotations

import pytest

from telegramtl import SchemaError
from telegramtl.schema import NamespaceNode, TypeDefinition


def _definition(node_id: str, name: str) -> TypeDefinition:
    return TypeDefinition(
        node_id=node_id, name=name, constructor_id=None, params=(), result_type=None
    )


class TestNamespaceNode:
    """Test branch and leaf insertion."""

    def test_branch_id_extends_parent(self) -> None:
        """Test child node_id is parent node_id plus segment."""
        root = NamespaceNode("Telegram.type")
        child = root.branch("foo")

        assert child.node_id == "Telegram.type.foo"
        assert root.branch("foo") is child

    def test_leaf_access(self) -> None:
        """Test leaves are reachable by attribute and item access."""
        root = NamespaceNode("Telegram.type")
        foo = root.branch("foo")
        leaf = foo.add_leaf("TypeFoo", _definition("Telegram.type.foo.TypeFoo", "foo.TypeFoo"))

        assert root.foo.TypeFoo is leaf
        assert root["foo"]["TypeFoo"] is leaf
        assert leaf.is_leaf
        assert not foo.is_leaf
        assert "foo" in root
        assert list(root) == ["foo"]

    def test_missing_attribute(self) -> None:
        """Test unknown members raise AttributeError."""
        root = NamespaceNode("Telegram.type")

        with pytest.raises(AttributeError, match="no member 'missing'"):
            root.missing

    def test_branch_over_leaf_raises(self) -> None:
        """Test a namespace cannot replace a declared leaf."""
        root = NamespaceNode("Telegram.type")
        root.add_leaf("foo", _definition("Telegram.type.foo", "foo"))

        with pytest.raises(SchemaError, match="already declared"):
            root.branch("foo")

    def test_leaf_over_branch_raises(self) -> None:
        """Test a leaf cannot replace a namespace."""
        root = NamespaceNode("Telegram.type")
        root.branch("foo")

        with pytest.raises(SchemaError, match="already a namespace"):
            root.add_leaf("foo", _definition("Telegram.type.foo", "foo"))

    def test_empty_segment_raises(self) -> None:
        """Test empty path segments are rejected."""
        root = NamespaceNode("Telegram.type")

        with pytest.raises(SchemaError, match="Empty path segment"):
            root.branch("")

    def test_freeze(self) -> None:
        """Test frozen trees reject new members but still resolve."""
        root = NamespaceNode("Telegram.type")
        foo = root.branch("foo")
        root.freeze()

        assert root.frozen and foo.frozen
        assert root.branch("foo") is foo
        with pytest.raises(SchemaError, match="frozen"):
            foo.branch("bar")

    def test_frozen_attributes_are_read_only(self) -> None:
        """Test frozen nodes reject rebinding or deleting their attributes."""
        root = NamespaceNode("Telegram.type")
        definition = _definition("Telegram.type.foo.TypeFoo", "foo.TypeFoo")
        leaf = root.branch("foo").add_leaf("TypeFoo", definition)
        root.freeze()

        with pytest.raises(SchemaError, match="frozen"):
            root.foo.node_id = "hijacked"
        with pytest.raises(SchemaError, match="frozen"):
            leaf.definition = None
        with pytest.raises(SchemaError, match="frozen"):
            del leaf.definition

        assert root.foo.node_id == "Telegram.type.foo"
        assert leaf.definition is definition

    def test_unfrozen_attributes_are_writable(self) -> None:
        """Test nodes stay writable until frozen."""
        node = NamespaceNode("Telegram.type")
        node.node_id = "Other.type"

        assert node.node_id == "Other.type"

    def test_resolve(self) -> None:
        """Test dotted path resolution."""
        root = NamespaceNode("Telegram.type")
        leaf = root.branch("a").branch("b").add_leaf(
            "C", _definition("Telegram.type.a.b.C", "a.b.C")
        )

        assert root.resolve("a.b.C") is leaf
        with pytest.raises(SchemaError, match="not found"):
            root.resolve("a.x")

    def test_walk_and_leaves(self) -> None:
        """Test depth-first iteration."""
        root = NamespaceNode("ns")
        a = root.branch("a")
        a.add_leaf("X", _definition("ns.a.X", "a.X"))
        root.add_leaf("Y", _definition("ns.Y", "Y"))

        assert {node.node_id for node in root.walk()} == {"ns", "ns.a", "ns.a.X", "ns.Y"}
        assert {node.node_id for node in root.leaves()} == {"ns.a.X", "ns.Y"}
