"""Java peer classification"""

from .types import TypeNode

JAVA_PEERABLE_INTERFACE = "Java.Interop.IJavaPeerable"

# Managed roots whose subclasses are bound to a Java object
JAVA_PEER_ROOTS = frozenset({
    "Java.Lang.Object",
    "Java.Lang.Throwable",
    "Java.Interop.JavaObject",
    "Java.Interop.JavaException",
})


def implements_interface(type: TypeNode, interface_name: str) -> bool:
    """Check the declared interfaces of ``type`` and each of its base types.

    Only interfaces listed directly on a visited type count; interface
    inheritance is not expanded.
    """
    for t in type.type_and_base_types():
        if interface_name in t.interfaces:
            return True
    return False


def has_java_peer(type: TypeNode) -> bool:
    """Check whether a managed type has a Java-side representation"""
    if type.is_interface and implements_interface(type, JAVA_PEERABLE_INTERFACE):
        return True

    return any(t.full_name in JAVA_PEER_ROOTS for t in type.type_and_base_types())
