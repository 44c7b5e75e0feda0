"""Type graph loader - reads JSON dumps of assembly metadata"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .types import (
    AttributeArgument, AttributeNode, FieldNode, MethodNode, ModuleNode,
    ParameterNode, TypeNode,
)

logger = logging.getLogger(__name__)


class TypeGraphError(ValueError):
    """Malformed type graph document"""


class TypeGraphLoader:
    """Parses one JSON type graph document into modules"""

    KINDS = ('class', 'interface', 'struct', 'enum')

    def __init__(self, content: str, source: str = "<string>"):
        self.content = content
        self.source = source

    @classmethod
    def from_path(cls, path) -> "TypeGraphLoader":
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TypeGraphError(f"{path}: not valid UTF-8: {e}") from e
        return cls(content, str(path))

    def load(self) -> list[ModuleNode]:
        """Parse and resolve references within this document only"""
        modules = self.parse()
        resolve_references(modules)
        return modules

    def parse(self) -> list[ModuleNode]:
        try:
            doc = json.loads(self.content)
        except json.JSONDecodeError as e:
            raise TypeGraphError(f"{self.source}: invalid JSON: {e}") from e

        if not isinstance(doc, dict) or not isinstance(doc.get("modules"), list):
            raise TypeGraphError(f"{self.source}: expected an object with a 'modules' list")
        return [self._parse_module(m) for m in doc["modules"]]

    def _parse_module(self, data: Any) -> ModuleNode:
        name = self._require(data, "name", "module")
        assembly = self._optional(data, "assembly", f"module '{name}'") or name.removesuffix(".dll")
        module = ModuleNode(name=name, assembly_name=assembly)
        for t in self._entries(data, "types", f"module '{name}'"):
            module.types.append(self._parse_type(t, assembly))
        return module

    def _parse_type(self, data: Any, assembly: str) -> TypeNode:
        name = self._require(data, "name", "type")
        what = f"type '{name}'"
        kind = data.get("kind", "class")
        if kind not in self.KINDS:
            raise TypeGraphError(f"{self.source}: {what} has unknown kind '{kind}'")

        type = TypeNode(
            name=name,
            namespace=self._optional(data, "namespace", what),
            assembly_name=assembly,
            is_value_type=kind in ('struct', 'enum'),
            is_enum=kind == 'enum',
            is_interface=kind == 'interface',
            base_type_name=self._optional(data, "baseType", what) or None,
            interfaces=self._names(data, "interfaces", what),
            attributes=[self._parse_attribute(a, name) for a in self._entries(data, "attributes", what)],
            fields=[
                FieldNode(
                    name=self._require(f, "name", f"field of {what}"),
                    type_full_name=self._optional(f, "type", f"field of {what}"),
                    is_static=bool(f.get("static", False)),
                )
                for f in self._entries(data, "fields", what)
            ],
            methods=[self._parse_method(m, what) for m in self._entries(data, "methods", what)],
        )

        for nested in self._entries(data, "nestedTypes", what):
            type.add_nested_type(self._parse_type(nested, assembly))
        return type

    def _parse_attribute(self, data: Any, owner: str) -> AttributeNode:
        what = f"attribute on '{owner}'"
        attr_type = self._require(data, "type", what)
        return AttributeNode(
            attribute_type_full_name=attr_type,
            attribute_type_interfaces=self._names(data, "interfaces", what),
            constructor_arguments=[
                AttributeArgument(value=a.get("value"), type_full_name=self._optional(a, "type", what))
                for a in self._entries(data, "arguments", what)
            ],
            named_arguments=[
                AttributeArgument(
                    value=a.get("value"),
                    type_full_name=self._optional(a, "type", what),
                    name=self._require(a, "name", f"named argument of {what}"),
                )
                for a in self._entries(data, "properties", what)
            ],
        )

    def _parse_method(self, data: Any, owner: str) -> MethodNode:
        name = self._require(data, "name", f"method of {owner}")
        what = f"method '{name}' of {owner}"
        return MethodNode(
            name=name,
            parameters=[
                ParameterNode(name=self._optional(p, "name", what), type_full_name=self._optional(p, "type", what))
                for p in self._entries(data, "parameters", what)
            ],
            is_constructor=bool(data.get("constructor", name in ('.ctor', '.cctor'))),
            is_static=bool(data.get("static", name == '.cctor')),
        )

    def _require(self, data: Any, key: str, what: str) -> str:
        if not isinstance(data, dict) or not isinstance(data.get(key), str) or not data[key]:
            raise TypeGraphError(f"{self.source}: {what} is missing '{key}'")
        return data[key]

    def _optional(self, data: dict, key: str, what: str) -> str:
        value = data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise TypeGraphError(f"{self.source}: {what} has a non-string '{key}'")
        return value

    def _entries(self, data: dict, key: str, what: str) -> list[dict]:
        """Return the list under ``key``, every entry an object"""
        entries = data.get(key, [])
        if not isinstance(entries, list):
            raise TypeGraphError(f"{self.source}: {what} has a non-list '{key}'")
        for entry in entries:
            if not isinstance(entry, dict):
                raise TypeGraphError(f"{self.source}: {what} has a non-object entry in '{key}'")
        return entries

    def _names(self, data: dict, key: str, what: str) -> list[str]:
        names = data.get(key, [])
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise TypeGraphError(f"{self.source}: {what} needs a list of names in '{key}'")
        return list(names)


def resolve_references(modules: Iterable[ModuleNode], references: Iterable[ModuleNode] = ()) -> None:
    """Link base types and attribute types by full name.

    Types in ``modules`` are searched before ``references``; the first
    definition of a full name wins. Unresolvable base types are left as None.
    """
    everything = [*modules, *references]
    index: dict[str, TypeNode] = {}
    for module in everything:
        for t in module.all_types():
            index.setdefault(t.full_name, t)

    for module in everything:
        for t in module.all_types():
            if t.base_type_name:
                t.base_type = index.get(t.base_type_name)
                if t.base_type is None:
                    logger.debug("Unresolved base type %s of %s", t.base_type_name, t.full_name)
            for attr in t.attributes:
                attr_type = index.get(attr.attribute_type_full_name)
                if not attr.attribute_type_interfaces and attr_type is not None:
                    attr.attribute_type_interfaces = list(attr_type.interfaces)


def load_type_graph(paths: Iterable, references: Iterable = ()) -> list[ModuleNode]:
    """Load input documents, resolving against inputs and reference documents.

    Only the modules of ``paths`` are returned.
    """
    modules = [m for p in paths for m in TypeGraphLoader.from_path(p).parse()]
    reference_modules = [m for p in references for m in TypeGraphLoader.from_path(p).parse()]
    resolve_references(modules, reference_modules)
    return modules
