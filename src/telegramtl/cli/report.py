"""Schema inspection CLI command."""

from __future__ import annotations

from pathlib import Path

from ..schema import ImportedSchema, NamespaceNode, TypeLanguage, import_schema, load_schema


def inspect_file(file_path: Path, type_prefix: str, service_prefix: str) -> ImportedSchema:
    """Import a JSON schema file and print its namespaces.

    Args:
        file_path: Path to a schema.json file
        type_prefix: Prefix for the constructor namespace
        service_prefix: Prefix for the method namespace

    Returns:
        The imported schema
    """
    description = load_schema(file_path)
    schema = import_schema(description, TypeLanguage(), type_prefix, service_prefix)

    print("|" * 7, "telegramtl: Telegram Type Language", "|" * 7)
    print(f"{schema.type_count} types, {schema.method_count} methods loaded.")
    print()

    print_namespace(schema.type)
    print_namespace(schema.service)
    return schema


def print_namespace(root: NamespaceNode) -> None:
    """Print one line per top-level namespace with its declaration count.

    Args:
        root: Namespace root to summarize
    """
    print(f"{'=' * 19} {root.node_id} {'=' * 19}")

    top_level = sum(1 for child in root.children.values() if child.is_leaf)
    if top_level:
        print(f"(top level){'.' * 29}{top_level}")

    for key, child in sorted(root.children.items()):
        if child.is_leaf:
            continue
        count = sum(1 for _ in child.leaves())
        print(f"{key}{'.' * max(1, 40 - len(key))}{count}")
    print()
