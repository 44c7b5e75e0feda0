"""Data types for the type metadata graph"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass
class AttributeArgument:
    """Positional or named custom attribute argument"""
    value: Any
    type_full_name: str = ""
    name: str = ""


@dataclass
class AttributeNode:
    """Custom attribute attached to a type"""
    attribute_type_full_name: str
    # Interfaces declared directly on the attribute type
    attribute_type_interfaces: list[str] = field(default_factory=list)
    constructor_arguments: list[AttributeArgument] = field(default_factory=list)
    named_arguments: list[AttributeArgument] = field(default_factory=list)


@dataclass
class FieldNode:
    """Declared field"""
    name: str
    type_full_name: str
    is_static: bool = False


@dataclass
class ParameterNode:
    """Method parameter"""
    name: str
    type_full_name: str = ""


@dataclass
class MethodNode:
    """Declared method or constructor"""
    name: str
    parameters: list[ParameterNode] = field(default_factory=list)
    is_constructor: bool = False
    is_static: bool = False


@dataclass(eq=False)
class TypeNode:
    """A type definition in the loaded graph.

    Nodes compare by identity; ``base_type`` and ``declaring_type`` are
    references into the same graph, so the chain is walked, never copied.
    """
    name: str
    namespace: str = ""
    assembly_name: str = ""
    is_value_type: bool = False
    is_enum: bool = False
    is_interface: bool = False
    base_type: Optional["TypeNode"] = field(default=None, repr=False)
    base_type_name: Optional[str] = None
    interfaces: list[str] = field(default_factory=list)
    attributes: list[AttributeNode] = field(default_factory=list, repr=False)
    fields: list[FieldNode] = field(default_factory=list, repr=False)
    methods: list[MethodNode] = field(default_factory=list, repr=False)
    nested_types: list["TypeNode"] = field(default_factory=list, repr=False)
    declaring_type: Optional["TypeNode"] = field(default=None, repr=False)

    @property
    def full_name(self) -> str:
        """Namespace-qualified name, ``Outer/Inner`` for nested types"""
        if self.declaring_type is not None:
            return f"{self.declaring_type.full_name}/{self.name}"
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def is_nested(self) -> bool:
        return self.declaring_type is not None

    def add_nested_type(self, nested: "TypeNode") -> "TypeNode":
        nested.declaring_type = self
        nested.assembly_name = nested.assembly_name or self.assembly_name
        self.nested_types.append(nested)
        return nested

    def base_types(self) -> Iterator["TypeNode"]:
        """Iterate the base chain, excluding this type"""
        t = self.base_type
        while t is not None:
            yield t
            t = t.base_type

    def type_and_base_types(self) -> Iterator["TypeNode"]:
        """Iterate this type followed by its base chain"""
        yield self
        yield from self.base_types()

    def walk(self) -> Iterator["TypeNode"]:
        """Pre-order walk over this type and all nested types"""
        yield self
        for nested in self.nested_types:
            yield from nested.walk()


@dataclass
class ModuleNode:
    """A loaded module with its top-level types"""
    name: str
    assembly_name: str
    types: list[TypeNode] = field(default_factory=list)

    def all_types(self) -> Iterator[TypeNode]:
        for t in self.types:
            yield from t.walk()


# JNI class name -> managed type, in insertion order
TypeMap = dict[str, TypeNode]
