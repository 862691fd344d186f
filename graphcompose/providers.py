import collections
import enum
import inspect

from . import iterables
from .context import default_context_type
from .errors import InvalidProviderError
from .fields import FieldDescriptor, field_descriptor


class ProviderScope(enum.Enum):
    process = "process"
    request = "request"


def resolver(type, *, name=None, params=None, description=None, deprecation_reason=None):
    def register_resolver(func):
        func.resolver_field = _ResolverField(
            name=name,
            type=type,
            params=params,
            description=description,
            deprecation_reason=deprecation_reason,
        )
        return func

    return register_resolver


_ResolverField = collections.namedtuple(
    "_ResolverField",
    ["name", "type", "params", "description", "deprecation_reason"],
)


class FieldProvider(object):
    """
    Base class for a bundle of resolver fields that can be merged into a
    composite object.

    Fields are declared by decorating methods with :func:`resolver`.
    Each method is called as ``method(self, args, context)``.
    """

    provider_name = None
    context_type = default_context_type
    declared_fields = ()

    @classmethod
    def type_name(cls):
        if cls.provider_name is None:
            return cls.__name__
        else:
            return cls.provider_name

    @classmethod
    def fields(cls):
        fields = cls.__dict__.get("_field_descriptors")
        if fields is None:
            fields = _collect_fields(cls)
            cls._field_descriptors = fields

        return fields


def _collect_fields(provider_type):
    fields = collections.OrderedDict()

    for owner in reversed(provider_type.__mro__):
        for descriptor in owner.__dict__.get("declared_fields", ()):
            fields[("declared", owner, descriptor.name)] = descriptor

        for attr_name, value in owner.__dict__.items():
            options = getattr(value, "resolver_field", None)
            if isinstance(options, _ResolverField):
                fields[("method", attr_name)] = _method_to_field(
                    attr_name,
                    value,
                    options,
                    resolve=getattr(provider_type, attr_name),
                )

    duplicates = [
        name
        for name, descriptors in iterables.to_multidict(
            (descriptor.name, descriptor)
            for descriptor in fields.values()
        ).items()
        if len(descriptors) > 1
    ]
    if duplicates:
        raise InvalidProviderError("{} declares field {} more than once".format(
            provider_type.type_name(),
            duplicates[0],
        ))

    return tuple(fields.values())


def _method_to_field(attr_name, func, options, resolve):
    if options.description is None:
        description = inspect.getdoc(func)
    else:
        description = options.description

    return field_descriptor(
        name=attr_name if options.name is None else options.name,
        type=options.type,
        params=options.params,
        resolve=resolve,
        description=description,
        deprecation_reason=options.deprecation_reason,
    )


def define_provider(name, fields, context_type=None):
    """
    Define a provider type from a sequence of field descriptors, for
    providers that are assembled at runtime rather than written as classes.
    """
    fields = tuple(fields)
    for field in fields:
        if not isinstance(field, FieldDescriptor):
            raise InvalidProviderError("{} was given {!r}, expected a FieldDescriptor".format(name, field))

    if context_type is None:
        context_type = default_context_type

    return type(name, (FieldProvider, ), dict(
        provider_name=name,
        context_type=context_type,
        declared_fields=fields,
    ))


def provider_factory(provider_type, factory):
    if not callable(factory):
        raise InvalidProviderError("factory for {} must be callable".format(_type_name(provider_type)))

    return ProviderSource(provider_type=provider_type, instance=None, factory=factory)


class ProviderSource(object):
    def __init__(self, provider_type, instance, factory):
        self.provider_type = provider_type
        self.instance = instance
        self.factory = factory

    @property
    def is_instance(self):
        return self.factory is None

    def create(self):
        if self.factory is None:
            return self.instance
        else:
            return self.factory()

    def __repr__(self):
        return "ProviderSource(provider_type={})".format(_type_name(self.provider_type))


def to_provider_source(provider):
    if isinstance(provider, ProviderSource):
        source = provider
    elif inspect.isclass(provider):
        source = ProviderSource(provider_type=provider, instance=None, factory=provider)
    else:
        source = ProviderSource(provider_type=type(provider), instance=provider, factory=None)

    if not _is_provider_type(source.provider_type):
        raise InvalidProviderError("{} is not a field provider: providers must define fields(), type_name() and context_type".format(
            _type_name(source.provider_type),
        ))

    return source


def _is_provider_type(value):
    return (
        inspect.isclass(value) and
        callable(getattr(value, "fields", None)) and
        callable(getattr(value, "type_name", None)) and
        hasattr(value, "context_type")
    )


def _type_name(value):
    return getattr(value, "__name__", repr(value))
