from .context import default_context_type, RequestContext
from .core import ArgumentDescription, composite_object, CompositeObject, FieldDescription, TypeDescription
from .errors import (
    CompositionError,
    ContextTypeMismatchError,
    DuplicateFieldError,
    GraphError,
    InvalidProviderError,
    UnknownFieldError,
)
from .fields import field_descriptor, FieldDescriptor
from .providers import define_provider, FieldProvider, provider_factory, ProviderScope, resolver
from .registry import build_registry, CompositeRegistry
from .representations import Object
from .schema import (
    Boolean,
    EnumType,
    field,
    Float,
    ID,
    input_field,
    InputObjectType,
    Int,
    ListType,
    NullableType,
    ObjectType,
    param,
    String,
)


__all__ = [
    "composite_object",
    "CompositeObject",
    "TypeDescription",
    "FieldDescription",
    "ArgumentDescription",

    "default_context_type",
    "RequestContext",

    "CompositionError",
    "ContextTypeMismatchError",
    "DuplicateFieldError",
    "GraphError",
    "InvalidProviderError",
    "UnknownFieldError",

    "define_provider",
    "field_descriptor",
    "FieldDescriptor",
    "FieldProvider",
    "provider_factory",
    "ProviderScope",
    "resolver",

    "build_registry",
    "CompositeRegistry",

    "Object",

    "Boolean",
    "EnumType",
    "field",
    "Float",
    "ID",
    "input_field",
    "InputObjectType",
    "Int",
    "ListType",
    "NullableType",
    "ObjectType",
    "param",
    "String",
]
