import collections.abc

from . import iterables
from .errors import GraphError
from .memo import lambdaize, memoize
from .representations import Object


_undefined = object()


class ScalarType(object):
    def __init__(self, name, coerce):
        self.name = name
        self._coerce = coerce

    def __str__(self):
        return self.name

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def coerce(self, value):
        return self._coerce(value)


def _coerce_boolean(value):
    if isinstance(value, bool):
        return value
    else:
        raise _coercion_error(value, Boolean)


Boolean = ScalarType("Boolean", coerce=_coerce_boolean)


def _coerce_float(value):
    if isinstance(value, float):
        return value
    elif isinstance(value, int) and not isinstance(value, bool):
        coerced = float(value)
        if coerced == value:
            return coerced

    raise _coercion_error(value, Float)


Float = ScalarType("Float", coerce=_coerce_float)


def _coerce_int(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    else:
        raise _coercion_error(value, Int)


Int = ScalarType("Int", coerce=_coerce_int)


def _coerce_string(value):
    if isinstance(value, str):
        return value
    else:
        raise _coercion_error(value, String)


String = ScalarType("String", coerce=_coerce_string)


def _coerce_id(value):
    if isinstance(value, str):
        return value
    elif isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    else:
        raise _coercion_error(value, ID)


ID = ScalarType("ID", coerce=_coerce_id)


class EnumType(object):
    def __init__(self, enum, description=None):
        self.enum = enum
        self.description = description

    @property
    def name(self):
        return self.enum.__name__

    def __str__(self):
        return self.name

    def __repr__(self):
        return "EnumType(name={!r})".format(self.name)

    def coerce(self, value):
        if isinstance(value, self.enum):
            return value

        try:
            return self.enum(value)
        except ValueError:
            raise _coercion_error(value, self) from None


class InputObjectType(object):
    def __init__(self, name, fields, description=None):
        self.name = name
        self.description = description
        if not callable(fields):
            fields = lambdaize(fields)
        self.fields = Fields(name, fields)
        self.instance_type = memoize(self._create_instance_type)

    def _create_instance_type(self):
        name = self.name

        def __init__(self, values):
            self._values = values
            for key in values:
                setattr(self, key, values[key])

        def __eq__(self, other):
            if isinstance(other, instance_type):
                return self._values == other._values
            else:
                return NotImplemented

        def __ne__(self, other):
            return not (self == other)

        def __repr__(self):
            return "{}({})".format(name, ", ".join(
                "{}={!r}".format(key, value)
                for key, value in self._values.items()
            ))

        instance_type = type(
            self.name,
            (object, ),
            dict(
                __init__=__init__,
                __repr__=__repr__,
                __eq__=__eq__,
                __ne__=__ne__,
            ),
        )

        return instance_type

    def __call__(self, **explicit_field_values):
        field_names = frozenset(explicit_field_values)

        def get_field_value(field):
            value = explicit_field_values.pop(field.name, None)
            if value is not None or (field.name in field_names and not field.has_default):
                return field.type.coerce(value)
            elif field.has_default:
                return field.default
            elif isinstance(field.type, NullableType):
                return None
            else:
                raise GraphError("{} is missing required field {}".format(self.name, field.name))

        field_values = iterables.to_dict(
            (field.name, get_field_value(field))
            for field in self.fields
        )

        if explicit_field_values:
            key = next(iter(explicit_field_values))
            raise GraphError("{} has no field {}".format(self.name, key))

        return self.instance_type()(field_values)

    def __repr__(self):
        return "InputObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name

    def coerce(self, value):
        if isinstance(value, self.instance_type()):
            return value
        elif isinstance(value, collections.abc.Mapping):
            return self(**value)
        else:
            raise _coercion_error(value, self.name)


def input_field(name, type, default=_undefined, description=None):
    return InputField(name, type, default, description=description)


class InputField(object):
    def __init__(self, name, type, default, description=None):
        self.name = name
        self.type = type
        self.default = default
        self.description = description

    @property
    def has_default(self):
        return self.default is not _undefined

    def __repr__(self):
        return "InputField(name={!r}, type={!r})".format(self.name, self.type)


class ListType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, ListType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "List({})".format(self.element_type)

    def coerce(self, value):
        if isinstance(value, (str, bytes)) or not isinstance(value, collections.abc.Iterable):
            raise _coercion_error(value, self)

        return [
            self.element_type.coerce(element)
            for element in value
        ]


class NullableType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, NullableType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __str__(self):
        return "Nullable({})".format(self.element_type)

    def __repr__(self):
        return "NullableType(element_type={!r})".format(self.element_type)

    def coerce(self, value):
        if value is None:
            return None
        else:
            return self.element_type.coerce(value)


class ObjectType(object):
    """
    A result type for provider fields. Values are read by field name, either
    as attributes or as mapping keys.
    """

    def __init__(self, name, fields, description=None):
        self.name = name
        self.description = description
        if not callable(fields):
            fields = lambdaize(fields)
        self.fields = Fields(name, fields)

    def __repr__(self):
        return "ObjectType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


class Fields(object):
    def __init__(self, type_name, fields):
        self._type_name = type_name
        self._fields = memoize(fields)

    def __iter__(self):
        return iter(self._fields())

    def __len__(self):
        return len(self._fields())

    def __getattr__(self, field_name):
        field = self._find_field(field_name)

        if field is None and field_name.endswith("_"):
            field = self._find_field(field_name[:-1])

        if field is None:
            raise GraphError("{} has no field {}".format(self._type_name, field_name))
        else:
            return field

    def _find_field(self, field_name):
        return iterables.find(lambda field: field.name == field_name, self._fields(), default=None)


def field(name, type, params=None, description=None, deprecation_reason=None):
    if params is None:
        params = ()
    return Field(
        name=name,
        type=type,
        params=params,
        description=description,
        deprecation_reason=deprecation_reason,
    )


class Field(object):
    def __init__(self, name, type, params, description, deprecation_reason):
        self.name = name
        self.type = type
        self.params = Params(name, params)
        self.description = description
        self.deprecation_reason = deprecation_reason

    def __repr__(self):
        return "Field(name={!r}, type={!r})".format(self.name, self.type)


class Params(object):
    def __init__(self, field_name, params):
        self._field_name = field_name
        self._params = tuple(params)

    def __iter__(self):
        return iter(self._params)

    def __len__(self):
        return len(self._params)

    def __getattr__(self, param_name):
        param = self._find_param(param_name)

        if param is None and param_name.endswith("_"):
            param = self._find_param(param_name[:-1])

        if param is None:
            raise GraphError("{} has no param {}".format(self._field_name, param_name))
        else:
            return param

    def _find_param(self, param_name):
        return iterables.find(lambda param: param.name == param_name, self._params, default=None)


def param(name, type, default=_undefined, description=None):
    return Parameter(name=name, type=type, default=default, description=description)


class Parameter(object):
    __slots__ = ("name", "type", "default", "description")

    def __init__(self, name, type, default, description):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "default", default)
        object.__setattr__(self, "description", description)

    def __setattr__(self, key, value):
        raise AttributeError("Parameter is immutable")

    @property
    def has_default(self):
        return self.default is not _undefined

    @property
    def is_required(self):
        return not self.has_default and not isinstance(self.type, NullableType)

    def bind(self, value):
        return self.type.coerce(value)

    def __repr__(self):
        return "Parameter(name={!r}, type={!r})".format(self.name, self.type)


def bind_args(field_name, params, raw_args):
    if raw_args is None:
        raw_args = {}

    unexpected = [
        key
        for key in raw_args
        if not any(param.name == key for param in params)
    ]
    if unexpected:
        raise GraphError("field {} has no param {}".format(field_name, unexpected[0]))

    def get_arg(param):
        value = raw_args.get(param.name)
        if value is not None:
            return param.bind(value)
        elif param.name in raw_args and not param.has_default:
            return param.bind(None)
        elif param.has_default:
            return param.default
        elif isinstance(param.type, NullableType):
            return None
        else:
            raise GraphError("field {} is missing required argument {}".format(field_name, param.name))

    return Object(iterables.to_dict(
        (param.name, get_arg(param))
        for param in params
    ))


def to_element_type(graph_type):
    if isinstance(graph_type, (ListType, NullableType)):
        return to_element_type(graph_type.element_type)
    else:
        return graph_type


def _coercion_error(value, target_type):
    return GraphError("cannot coerce {!r} to {}".format(value, target_type))
