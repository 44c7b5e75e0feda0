"""Shared fixtures: a minimal platform binding graph and attribute helpers."""

from pathlib import Path

import pytest

from typemapgen import AttributeArgument, AttributeNode, MethodNode, ParameterNode, TypeNode

SAMPLES_DIR = Path(__file__).parent.parent / "samples"

NAME_PROVIDER = "Java.Interop.IJniNameProviderAttribute"


def register(name=None, **named) -> AttributeNode:
    """Build an [Register] attribute, positional when ``name`` is given."""
    return AttributeNode(
        attribute_type_full_name="Android.Runtime.RegisterAttribute",
        attribute_type_interfaces=[NAME_PROVIDER],
        constructor_arguments=[AttributeArgument(value=name, type_full_name="System.String")] if name is not None else [],
        named_arguments=[AttributeArgument(value=v, type_full_name="System.String", name=k) for k, v in named.items()],
    )


def self_ctor() -> MethodNode:
    return MethodNode(
        name=".ctor",
        is_constructor=True,
        parameters=[ParameterNode("__self", "Java.Lang.Object"), ParameterNode("value", "System.Int32")],
    )


class Platform:
    """Root types of the platform binding assembly."""

    assembly = "Mono.Android"

    def __init__(self):
        self.object = TypeNode(
            name="Object",
            namespace="Java.Lang",
            assembly_name=self.assembly,
            interfaces=["Java.Interop.IJavaPeerable"],
            attributes=[register("java/lang/Object")],
            methods=[MethodNode(".ctor", is_constructor=True)],
        )
        self.throwable = TypeNode(
            name="Throwable",
            namespace="Java.Lang",
            assembly_name=self.assembly,
            attributes=[register("java/lang/Throwable")],
        )
        self.java_object = TypeNode(name="JavaObject", namespace="Java.Interop", assembly_name="Java.Interop")
        self.java_exception = TypeNode(name="JavaException", namespace="Java.Interop", assembly_name="Java.Interop")

    def subclass(self, name, namespace="", assembly="MyApp", base=None, **kwargs) -> TypeNode:
        return TypeNode(
            name=name,
            namespace=namespace,
            assembly_name=assembly,
            base_type=base or self.object,
            **kwargs,
        )


@pytest.fixture
def platform() -> Platform:
    return Platform()


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES_DIR
