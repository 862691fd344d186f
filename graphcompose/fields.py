from . import schema


def field_descriptor(name, type, resolve, params=None, description=None, deprecation_reason=None):
    """
    Create the descriptor of a single resolver field.

    ``resolve`` is called as ``resolve(provider, args, context)``, where
    ``provider`` is the instance of the provider that owns the field and
    ``args`` is an :class:`~graphcompose.representations.Object` of bound
    arguments. It may return a value or an awaitable.
    """
    if params is None:
        params = ()

    return FieldDescriptor(
        name=name,
        type=type,
        params=params,
        resolve=resolve,
        description=description,
        deprecation_reason=deprecation_reason,
    )


class FieldDescriptor(object):
    __slots__ = ("name", "type", "params", "resolve", "description", "deprecation_reason")

    def __init__(self, name, type, params, resolve, description, deprecation_reason):
        if not callable(resolve):
            raise TypeError("resolve for field {} must be callable, was {!r}".format(name, resolve))

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "params", schema.Params(name, params))
        object.__setattr__(self, "resolve", resolve)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "deprecation_reason", deprecation_reason)

    def __setattr__(self, key, value):
        raise AttributeError("FieldDescriptor is immutable")

    def __delattr__(self, key):
        raise AttributeError("FieldDescriptor is immutable")

    @property
    def is_deprecated(self):
        return self.deprecation_reason is not None

    def bind_args(self, raw_args):
        return schema.bind_args(self.name, tuple(self.params), raw_args)

    def invoke(self, provider, raw_args, context):
        return self.resolve(provider, self.bind_args(raw_args), context)

    def __repr__(self):
        return "FieldDescriptor(name={!r}, type={!r})".format(self.name, self.type)
