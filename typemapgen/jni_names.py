"""JNI name resolution - maps managed types to Java binary class names"""

from typing import Optional

from .crc64 import crc64, to_hex
from .java_peers import has_java_peer
from .types import AttributeNode, TypeNode

PLATFORM_ASSEMBLY = "Mono.Android"
CRC64_PACKAGE_PREFIX = "crc64"

JNI_NAME_PROVIDER_INTERFACE = "Java.Interop.IJniNameProviderAttribute"
REGISTRATION_ATTRIBUTES = frozenset({
    "Android.Runtime.RegisterAttribute",
    "Java.Interop.JniTypeSignatureAttribute",
})
# Constructor parameter carrying the enclosing instance of an inner class
OUTER_INSTANCE_PARAMETER = "__self"


class JniNameResolver:
    """Derives JNI binary class names for types with a Java peer"""

    PRIMITIVE_SIGNATURES = {
        'System.Byte': 'B',
        'System.Char': 'C',
        'System.Double': 'D',
        'System.Single': 'F',
        'System.Int32': 'I',
        'System.Int64': 'J',
        'System.Int16': 'S',
        'System.Boolean': 'Z',
    }

    def __init__(self, platform_assembly: str = PLATFORM_ASSEMBLY):
        self.platform_assembly = platform_assembly

    def resolve_name(self, type: TypeNode) -> Optional[str]:
        """Return the JNI name of ``type``, or None for unmapped value types.

        ``type`` is expected to have a Java peer.
        """
        if type.is_value_type:
            return self.primitive_signature(type)

        if type.full_name == "System.String":
            return "java/lang/String"

        return self._jni_name(type)

    @classmethod
    def primitive_signature(cls, type: TypeNode) -> Optional[str]:
        """Map a primitive or enum to its single-letter JNI signature"""
        if type.is_enum:
            storage = cls._enum_storage_type(type)
            return cls.PRIMITIVE_SIGNATURES.get(storage) if storage else None
        return cls.PRIMITIVE_SIGNATURES.get(type.full_name)

    @staticmethod
    def _enum_storage_type(type: TypeNode) -> Optional[str]:
        instance_fields = [f for f in type.fields if not f.is_static]
        for f in instance_fields:
            if f.name == "value__":
                return f.type_full_name
        return instance_fields[0].type_full_name if instance_fields else None

    def _jni_name(self, type: TypeNode) -> str:
        name_parts = []
        override = None
        ns_type = type

        # Walk outwards until an override or the outermost type
        decl_type = type
        while decl_type is not None:
            ns_type = decl_type
            override = self.name_from_attributes(decl_type)
            if override:
                break
            n = decl_type.name.replace('`', '_')
            if self.is_non_static_inner_class(decl_type):
                n = f"${decl_type.declaring_type.name}_{n}"
            name_parts.append(n)
            decl_type = decl_type.declaring_type

        if override and not name_parts:
            return override

        name_parts.reverse()
        nested_suffix = "_".join(name_parts).replace("_$", "$")
        if override:
            return f"{override}_{nested_suffix}".replace("_$", "$")

        package = self.package_name(ns_type).replace('.', '/')
        return f"{package}/{nested_suffix}" if package else nested_suffix

    @staticmethod
    def name_from_attributes(type: TypeNode) -> Optional[str]:
        """Return the JNI name given by a name-provider attribute, if any"""
        for attr in type.attributes:
            if JNI_NAME_PROVIDER_INTERFACE not in attr.attribute_type_interfaces:
                continue
            name = _attribute_name(attr)
            if name:
                return name.replace('.', '/')
        return None

    @staticmethod
    def is_non_static_inner_class(type: TypeNode) -> bool:
        if not type.is_nested:
            return False
        if not has_java_peer(type.declaring_type):
            return False

        for base in type.base_types():
            if not any(a.attribute_type_full_name in REGISTRATION_ATTRIBUTES for a in base.attributes):
                continue
            # Stop at the first base type with a registration attribute
            return any(
                m.is_constructor and not m.is_static
                and any(p.name == OUTER_INSTANCE_PARAMETER for p in m.parameters)
                for m in base.methods
            )
        return False

    def package_name(self, type: TypeNode) -> str:
        if type.assembly_name == self.platform_assembly:
            return type.namespace.lower()
        data = f"{type.namespace}:{type.assembly_name}".encode("utf-8")
        return CRC64_PACKAGE_PREFIX + to_hex(crc64(data))


def _attribute_name(attr: AttributeNode) -> Optional[str]:
    for arg in attr.named_arguments:
        if arg.name == "Name":
            return arg.value if isinstance(arg.value, str) else None

    if attr.constructor_arguments:
        first = attr.constructor_arguments[0]
        if first.type_full_name == "System.String" and isinstance(first.value, str):
            return first.value
    return None
