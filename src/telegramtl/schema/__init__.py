"""Schema import for telegramtl.

This package turns flat type-language declarations into the prefixed
``type``/``service`` namespace trees shared by every client.
"""

from __future__ import annotations

from .builder import BUILTIN_TYPES, SchemaLayer, TreeTypeBuilder, TypeBuilder, TypeLanguage
from .description import (
    ConstructorDeclaration,
    MethodDeclaration,
    ParamDeclaration,
    SchemaDescription,
)
from .importer import ImportedSchema, import_schema, load_schema
from .namespace import Definition, LeafKind, MethodDefinition, NamespaceNode, TypeDefinition

__all__ = [
    # Import
    "import_schema",
    "load_schema",
    "ImportedSchema",
    # Description
    "SchemaDescription",
    "ConstructorDeclaration",
    "MethodDeclaration",
    "ParamDeclaration",
    # Namespace
    "NamespaceNode",
    "LeafKind",
    "Definition",
    "TypeDefinition",
    "MethodDefinition",
    # Schema layer
    "SchemaLayer",
    "TypeBuilder",
    "TreeTypeBuilder",
    "TypeLanguage",
    "BUILTIN_TYPES",
]
