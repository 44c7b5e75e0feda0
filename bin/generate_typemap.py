#!/usr/bin/env python3
"""
JNI Type Map Generator

Loads JSON type graph dumps, finds every managed type with a Java peer and
generates a C# table mapping JNI class names to those types.

Usage:
    python generate_typemap.py MyApp.json --reference Mono.Android.json --output-dir generated/
    python generate_typemap.py MyApp.json Mono.Android.json --list
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path so typemapgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from typemapgen import (
    CSharpGenerator,
    JniNameResolver,
    TypeGraphError,
    TypeMapBuilder,
    TypeMapError,
    load_type_graph,
)
from typemapgen.jni_names import PLATFORM_ASSEMBLY


def main(argv=None):
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Generate a JNI type map from type graph dumps")
    parser.add_argument("graphs", nargs="+", help="Type graph JSON files to scan")
    parser.add_argument("--reference", "-r", action="append", default=[],
                        help="Type graph used only to resolve base types (repeatable)")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--namespace", "-n", default="Java.Interop", help="C# namespace of the generated class")
    parser.add_argument("--class-name", default="TypeMap", help="Generated class name")
    parser.add_argument("--platform-assembly", default=PLATFORM_ASSEMBLY,
                        help="Assembly whose namespaces map directly to Java packages")
    parser.add_argument("--list", action="store_true", help="Print Java peer types instead of generating")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        for graph in args.graphs:
            print(graph)
        modules = load_type_graph(args.graphs, args.reference)
        builder = TypeMapBuilder(JniNameResolver(args.platform_assembly))
        type_map = builder.build(modules)
    except (TypeGraphError, TypeMapError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.list:
        # Every peer, including those whose name was already taken
        for type in builder.java_types(modules):
            print(f"{type.full_name} -> {builder.resolver.resolve_name(type)}")
        return 0

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"{args.class_name}.g.cs"
    path.write_text(CSharpGenerator(type_map, args.namespace, args.class_name).generate())
    print(f"Generated: {path} ({len(type_map)} types)")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
