import collections
import contextlib
import inspect
import logging

from . import iterables
from .context import RequestContext, adapt_context, default_context_type, release_on_exit
from .errors import CompositionError, ContextTypeMismatchError, GraphError, UnknownFieldError
from .providers import ProviderScope, to_provider_source
from .registry import build_registry


_logger = logging.getLogger(__name__)


def composite_object(name, providers, *, context_type=None, scope=ProviderScope.process, description=None, public=True):
    """
    Merge the fields of ``providers`` into a single object type called
    ``name``.

    ``providers`` may contain provider types, which are constructed with no
    arguments, provider instances, or factories created with
    :func:`~graphcompose.providers.provider_factory`. All providers must
    accept ``context_type``, which defaults to any context.

    Raises a :class:`~graphcompose.errors.CompositionError` if the
    providers cannot be merged. No object is built in that case.
    """
    if context_type is None:
        context_type = default_context_type

    scope = ProviderScope(scope)

    try:
        sources = [to_provider_source(provider) for provider in providers]

        for source in sources:
            _check_context_type(source.provider_type, context_type)
            if scope == ProviderScope.request and source.is_instance:
                raise CompositionError(
                    "{} was given as an instance but {} uses request-scoped providers: pass the provider type or a factory instead".format(
                        source.provider_type.type_name(),
                        name,
                    ),
                )

        registry = build_registry(source.provider_type for source in sources)

        repeated = [
            provider_type
            for provider_type, provider_sources in iterables.to_multidict(
                (source.provider_type, source)
                for source in sources
            ).items()
            if len(provider_sources) > 1
        ]
        if repeated:
            raise CompositionError("{} is included in {} more than once".format(repeated[0].type_name(), name))
    except GraphError as error:
        _logger.error("could not compose %s: %s", name, error)
        raise

    composite = CompositeObject(
        name=name,
        sources=sources,
        registry=registry,
        context_type=context_type,
        scope=scope,
        description=description,
        public=public,
    )
    _logger.info(
        "composed %s from %s with %s fields",
        name,
        ", ".join(source.provider_type.type_name() for source in sources) or "no providers",
        len(registry),
    )
    return composite


def _check_context_type(provider_type, context_type):
    provider_context_type = provider_type.context_type
    if provider_context_type is None:
        provider_context_type = default_context_type

    if not (isinstance(context_type, type) and isinstance(provider_context_type, type)):
        compatible = provider_context_type == context_type
    else:
        compatible = issubclass(context_type, provider_context_type)

    if not compatible:
        raise ContextTypeMismatchError(provider_type.type_name(), provider_context_type, context_type)


class CompositeObject(object):
    def __init__(self, name, sources, registry, context_type, scope, description, public):
        self.name = name
        self.context_type = context_type
        self.scope = scope
        self.description = description
        self.public = public
        self._registry = registry
        self._sources = iterables.to_dict(
            (source.provider_type, source)
            for source in sources
        )
        if scope == ProviderScope.process:
            self._instances = iterables.to_dict(
                (source.provider_type, source.create())
                for source in sources
            )
        else:
            self._instances = None

    @property
    def providers(self):
        return tuple(self._sources)

    @property
    def fields(self):
        return self._registry.fields

    @property
    def registry(self):
        return self._registry

    def describe(self):
        return TypeDescription(
            name=self.name,
            description=self.description,
            public=self.public,
            fields=tuple(
                _describe_field(field)
                for field in self._registry.fields
            ),
        )

    def request(self, context=None):
        return RequestContext(context)

    def dispatch(self, field_name, raw_args, context):
        entry = self._entry(field_name)
        request = adapt_context(context)

        if self._instances is not None:
            provider = self._instances[entry.provider_type]
        elif isinstance(request, RequestContext):
            provider = request.provider((self, entry.provider_type), self._sources[entry.provider_type].create)
        else:
            return self._dispatch_to_own_provider(entry, raw_args, request.value)

        return entry.field.invoke(provider, raw_args, request.value)

    def _dispatch_to_own_provider(self, entry, raw_args, context):
        provider = self._sources[entry.provider_type].create()

        with contextlib.ExitStack() as stack:
            release_on_exit(stack, provider)
            result = entry.field.invoke(provider, raw_args, context)
            if inspect.isawaitable(result):
                return _release_after(result, stack.pop_all())
            else:
                return result

    def _entry(self, field_name):
        entry = self._registry.get(field_name)
        if entry is None:
            _logger.debug("dispatch to unknown field %s on %s", field_name, self.name)
            raise UnknownFieldError(field_name, self.name)
        return entry

    def __repr__(self):
        return "CompositeObject(name={!r})".format(self.name)

    def __str__(self):
        return self.name


async def _release_after(awaitable, stack):
    with stack:
        return await awaitable


TypeDescription = collections.namedtuple("TypeDescription", ["name", "description", "public", "fields"])

FieldDescription = collections.namedtuple(
    "FieldDescription",
    ["name", "description", "deprecation_reason", "type", "arguments"],
)

ArgumentDescription = collections.namedtuple(
    "ArgumentDescription",
    ["name", "type", "has_default", "default", "description"],
)


def _describe_field(field):
    return FieldDescription(
        name=field.name,
        description=field.description,
        deprecation_reason=field.deprecation_reason,
        type=field.type,
        arguments=tuple(
            ArgumentDescription(
                name=param.name,
                type=param.type,
                has_default=param.has_default,
                default=param.default if param.has_default else None,
                description=param.description,
            )
            for param in field.params
        ),
    )
