"""
JNI Type Map Generator Package

Walks a loaded type metadata graph and:
  1. Classifies which managed types have a Java peer
  2. Derives each peer's JNI binary class name
  3. Builds an ordered JNI name -> type table
  4. Emits the table as C# source
"""

from .types import (
    AttributeArgument, AttributeNode, FieldNode, MethodNode, ModuleNode,
    ParameterNode, TypeMap, TypeNode,
)
from .crc64 import Crc64, crc64, to_hex
from .java_peers import has_java_peer, implements_interface
from .jni_names import JniNameResolver
from .builder import TypeMapBuilder, TypeMapError
from .loader import TypeGraphError, TypeGraphLoader, load_type_graph, resolve_references
from .csharp_generator import CSharpGenerator

__all__ = [
    'AttributeArgument', 'AttributeNode', 'FieldNode', 'MethodNode',
    'ModuleNode', 'ParameterNode', 'TypeMap', 'TypeNode',
    'Crc64', 'crc64', 'to_hex',
    'has_java_peer', 'implements_interface', 'JniNameResolver',
    'TypeMapBuilder', 'TypeMapError',
    'TypeGraphError', 'TypeGraphLoader', 'load_type_graph', 'resolve_references',
    'CSharpGenerator',
]
