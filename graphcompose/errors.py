class GraphError(Exception):
    pass


class CompositionError(GraphError):
    pass


class InvalidProviderError(CompositionError):
    pass


class DuplicateFieldError(CompositionError):
    def __init__(self, field_name, provider_names):
        self.field_name = field_name
        self.provider_names = tuple(provider_names)
        super().__init__("Conflicting field in composed objects: {} is declared by {}".format(
            field_name,
            ", ".join(self.provider_names),
        ))


class ContextTypeMismatchError(CompositionError):
    def __init__(self, provider_name, provider_context_type, context_type):
        self.provider_name = provider_name
        self.provider_context_type = provider_context_type
        self.context_type = context_type
        super().__init__("{} expects context of type {} but the composite provides {}".format(
            provider_name,
            _type_name(provider_context_type),
            _type_name(context_type),
        ))


class UnknownFieldError(GraphError):
    def __init__(self, field_name, type_name):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__("Field `{}` not found on type `{}`".format(field_name, type_name))


def _type_name(value):
    return getattr(value, "__qualname__", repr(value))
