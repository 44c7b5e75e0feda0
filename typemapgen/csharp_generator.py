"""C# Generator - emits the JNI name lookup table as C# source"""

import re

from .types import TypeMap


class CSharpGenerator:
    """Generates a C# dictionary mapping JNI names to managed types"""

    def __init__(self, type_map: TypeMap, namespace: str = "Java.Interop", class_name: str = "TypeMap"):
        self.type_map = type_map
        self.namespace = namespace
        self.class_name = class_name

    def generate(self) -> str:
        """Generate the complete C# source file"""
        lines = [
            "// AUTO-GENERATED - DO NOT EDIT",
            "using System;",
            "using System.Collections.Generic;",
            "",
            f"namespace {self.namespace}",
            "{",
            f"    static partial class {self.class_name}",
            "    {",
            "        internal static readonly Dictionary<string, Type> Types = new Dictionary<string, Type> (StringComparer.Ordinal) {",
        ]

        for jni_name, type in self.type_map.items():
            lines.append(f"            {{ {self.string_literal(jni_name)}, typeof ({self.type_reference(type.full_name)}) }},")

        lines.extend([
            "        };",
            "    }",
            "}",
            "",
        ])
        return "\n".join(lines)

    @staticmethod
    def type_reference(full_name: str) -> str:
        """Convert a metadata full name to a C# typeof() operand"""
        # Generic arity: Name`2 -> Name<,>
        def open_generic(m: re.Match) -> str:
            return f"{m.group(1)}<{',' * (int(m.group(2)) - 1)}>"

        parts = [re.sub(r'^(.*)`(\d+)$', open_generic, p) for p in full_name.split('/')]
        return "global::" + ".".join(parts)

    @staticmethod
    def string_literal(value: str) -> str:
        escaped = value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'
