import collections
import logging
import types

from . import iterables
from .errors import DuplicateFieldError


_logger = logging.getLogger(__name__)


RegistryEntry = collections.namedtuple("RegistryEntry", ["provider_type", "field"])


def build_registry(provider_types):
    """
    Merge the fields of each provider into a single namespace.

    Providers are merged in the order given, and each provider's fields in
    declaration order. If any field name is declared more than once, no
    registry is built: :class:`DuplicateFieldError` is raised naming the
    first such field and every provider that declares it.
    """
    provider_types = tuple(provider_types)

    entries = [
        RegistryEntry(provider_type=provider_type, field=field)
        for provider_type in provider_types
        for field in provider_type.fields()
    ]

    entries_by_name = iterables.to_multidict(
        (entry.field.name, entry)
        for entry in entries
    )
    for field_name, named_entries in entries_by_name.items():
        if len(named_entries) > 1:
            raise DuplicateFieldError(
                field_name,
                iterables.unique(
                    entry.provider_type.type_name()
                    for entry in named_entries
                ),
            )

    for entry in entries:
        _logger.debug("registered field %s from %s", entry.field.name, entry.provider_type.type_name())

    return CompositeRegistry(entries)


class CompositeRegistry(object):
    def __init__(self, entries):
        entries = tuple(entries)
        self._entries = entries
        self._index = types.MappingProxyType(iterables.to_dict(
            (entry.field.name, entry)
            for entry in entries
        ))

    def get(self, field_name):
        return self._index.get(field_name)

    @property
    def field_names(self):
        return tuple(entry.field.name for entry in self._entries)

    @property
    def fields(self):
        return tuple(entry.field for entry in self._entries)

    def fields_for(self, provider_type):
        return tuple(
            entry.field
            for entry in self._entries
            if entry.provider_type is provider_type
        )

    def __contains__(self, field_name):
        return field_name in self._index

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return "CompositeRegistry(field_names={!r})".format(self.field_names)
