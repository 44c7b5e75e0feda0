"""TypeMap builder - collects Java peer types under their JNI names"""

import logging
from typing import Iterable, Optional

from .java_peers import has_java_peer
from .jni_names import JniNameResolver
from .types import ModuleNode, TypeMap, TypeNode

logger = logging.getLogger(__name__)


class TypeMapError(Exception):
    """A Java peer type produced no usable JNI name"""

    def __init__(self, type: TypeNode, message: str = ""):
        self.type = type
        super().__init__(message or f"Unable to determine JNI name for type '{type.full_name}'")


class TypeMapBuilder:
    """Walks loaded modules and maps JNI names to the types that own them"""

    def __init__(self, resolver: Optional[JniNameResolver] = None):
        self.resolver = resolver or JniNameResolver()

    def build(self, modules: Iterable[ModuleNode]) -> TypeMap:
        type_map: TypeMap = {}
        for module in modules:
            logger.debug("Scanning module %s (%s)", module.name, module.assembly_name)
            for type in module.types:
                self.add_type(type_map, type)
        return type_map

    def add_type(self, type_map: TypeMap, type: TypeNode) -> None:
        """Add ``type`` and then its nested types, depth first"""
        if has_java_peer(type):
            name = self.resolver.resolve_name(type)
            if not name:
                raise TypeMapError(type)

            if name in type_map:
                logger.debug("Duplicate JNI name %s for %s, keeping %s",
                             name, type.full_name, type_map[name].full_name)
            else:
                type_map[name] = type

        for nested in type.nested_types:
            self.add_type(type_map, nested)

    @staticmethod
    def java_types(modules: Iterable[ModuleNode]) -> list[TypeNode]:
        """List every type with a Java peer, in visit order"""
        return [t for module in modules for t in module.all_types() if has_java_peer(t)]
