"""Declarative schema description models.

A schema description is the flat input of a schema import: two collections of
dotted-name declarations, one for constructors (types) and one for methods.
Both the mapping layout (``name -> declaration``) and the list layout of
Telegram's published ``schema.json`` are accepted.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..exceptions import SchemaError


class ParamDeclaration(BaseModel):
    """A single parameter of a constructor or method."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: str


class Declaration(BaseModel):
    """Fields shared by constructor and method declarations.

    Attributes:
        id: Numeric constructor id. Telegram publishes ids as signed 32-bit
            integers encoded in strings; they are coerced to int.
        params: Ordered parameters
        type: Result type name
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[int] = None
    params: Tuple[ParamDeclaration, ...] = ()
    type: Optional[str] = None


class ConstructorDeclaration(Declaration):
    """A type constructor, named by ``predicate`` in the list layout."""

    predicate: Optional[str] = None


class MethodDeclaration(Declaration):
    """A remote method, named by ``method`` in the list layout."""

    method: Optional[str] = None


def _index_by(value: Any, name_key: str) -> Any:
    """Turn a list of declarations into a ``name -> declaration`` mapping."""
    if not isinstance(value, (list, tuple)):
        return value

    indexed: Dict[str, Any] = {}
    for item in value:
        if isinstance(item, BaseModel):
            name = getattr(item, name_key, None)
        elif isinstance(item, Mapping):
            name = item.get(name_key)
        else:
            raise ValueError(f"declaration must be an object, got {item!r}")
        if not name:
            raise ValueError(f"declaration without '{name_key}': {item!r}")
        if name in indexed:
            raise ValueError(f"duplicate declaration '{name}'")
        indexed[name] = item
    return indexed


class SchemaDescription(BaseModel):
    """Flat schema description: constructors and methods keyed by dotted name.

    Example:
        >>> description = SchemaDescription.from_object({
        ...     "constructors": {"foo.TypeFoo": {"type": "foo.Foo"}},
        ...     "methods": {"foo.callFoo": {"type": "foo.Foo"}},
        ... })
        >>> sorted(description.constructors)
        ['foo.TypeFoo']
    """

    model_config = ConfigDict(frozen=True)

    constructors: Dict[str, ConstructorDeclaration]
    methods: Dict[str, MethodDeclaration]

    @field_validator("constructors", mode="before")
    @classmethod
    def _index_constructors(cls, value: Any) -> Any:
        return _index_by(value, "predicate")

    @field_validator("methods", mode="before")
    @classmethod
    def _index_methods(cls, value: Any) -> Any:
        return _index_by(value, "method")

    @classmethod
    def from_object(cls, obj: Any) -> SchemaDescription:
        """Validate a raw mapping (or pass through an existing description).

        Raises:
            SchemaError: If either collection is missing or malformed
        """
        if isinstance(obj, cls):
            return obj
        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            raise SchemaError(f"Invalid schema description: {e}") from e

    @classmethod
    def from_json(cls, data: str | bytes) -> SchemaDescription:
        """Validate a JSON document.

        Raises:
            SchemaError: If the document is not valid JSON or not a valid description
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise SchemaError(f"Invalid schema document: {e}") from e

    def defined_types(self) -> frozenset[str]:
        """Names a declaration may reference as a parameter or result type.

        Every constructor contributes its full dotted name, its last segment
        (Telegram refers to bare constructors such as ``true`` this way) and
        its result type.
        """
        names: set[str] = set()
        for name, declaration in self.constructors.items():
            names.add(name)
            names.add(name.rsplit(".", 1)[-1])
            if declaration.type:
                names.add(declaration.type)
        return frozenset(names)
