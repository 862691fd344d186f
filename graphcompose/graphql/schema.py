import collections.abc

import graphql

from .. import iterables, schema
from ..errors import DuplicateFieldError
from ..core import CompositeObject
from .naming import snake_case_to_camel_case


class Schema(object):
    def __init__(self, query_type, mutation_type, types, graphql_schema):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.types = types
        self.graphql_schema = graphql_schema


def create_graphql_schema(query_type, mutation_type=None, types=None):
    if types is None:
        types = ()

    graphql_types = {}

    def to_graphql_type(graph_type):
        if graph_type not in graphql_types:
            graphql_types[graph_type] = generate_graphql_type(graph_type)

        return graphql_types[graph_type]

    def generate_graphql_type(graph_type):
        if graph_type == schema.Boolean:
            return graphql.GraphQLNonNull(graphql.GraphQLBoolean)
        elif graph_type == schema.Float:
            return graphql.GraphQLNonNull(graphql.GraphQLFloat)
        elif graph_type == schema.Int:
            return graphql.GraphQLNonNull(graphql.GraphQLInt)
        elif graph_type == schema.String:
            return graphql.GraphQLNonNull(graphql.GraphQLString)
        elif graph_type == schema.ID:
            return graphql.GraphQLNonNull(graphql.GraphQLID)

        elif isinstance(graph_type, schema.EnumType):
            values = iterables.to_dict(
                (member.value, graphql.GraphQLEnumValue(member))
                for member in graph_type.enum
            )
            graphql_type = graphql.GraphQLEnumType(
                graph_type.name,
                values=values,
                description=graph_type.description,
            )
            return graphql.GraphQLNonNull(graphql_type)

        elif isinstance(graph_type, schema.InputObjectType):
            return graphql.GraphQLNonNull(graphql.GraphQLInputObjectType(
                name=graph_type.name,
                fields=lambda: iterables.to_dict(
                    (snake_case_to_camel_case(field.name), to_graphql_input_field(field))
                    for field in graph_type.fields
                ),
                out_type=lambda values: graph_type(**values),
                description=graph_type.description,
            ))

        elif isinstance(graph_type, schema.ListType):
            return graphql.GraphQLNonNull(graphql.GraphQLList(to_graphql_type(graph_type.element_type)))

        elif isinstance(graph_type, schema.NullableType):
            return to_graphql_type(graph_type.element_type).of_type

        elif isinstance(graph_type, schema.ObjectType):
            return graphql.GraphQLNonNull(graphql.GraphQLObjectType(
                name=graph_type.name,
                fields=lambda: iterables.to_dict(
                    (snake_case_to_camel_case(field.name), to_graphql_field(field, resolve=_read_value(field.name)))
                    for field in graph_type.fields
                ),
                description=graph_type.description,
            ))

        elif isinstance(graph_type, CompositeObject):
            _check_graphql_field_names(graph_type)
            return graphql.GraphQLNonNull(graphql.GraphQLObjectType(
                name=graph_type.name,
                fields=lambda: iterables.to_dict(
                    (snake_case_to_camel_case(field.name), to_graphql_field(field, resolve=_dispatch(graph_type, field.name)))
                    for field in graph_type.fields
                ),
                description=graph_type.description,
            ))

        else:
            raise ValueError("unsupported type: {}".format(graph_type))

    def to_graphql_input_field(graph_field):
        graphql_type = to_graphql_type(graph_field.type)

        if graph_field.has_default and isinstance(graphql_type, graphql.GraphQLNonNull):
            graphql_type = graphql_type.of_type

        return graphql.GraphQLInputField(
            type_=graphql_type,
            default_value=_graphql_default(graph_field),
            description=graph_field.description,
            out_name=graph_field.name,
        )

    def to_graphql_field(graph_field, resolve):
        return graphql.GraphQLField(
            type_=to_graphql_type(graph_field.type),
            args=iterables.to_dict(
                (snake_case_to_camel_case(param.name), to_graphql_argument(param))
                for param in graph_field.params
            ),
            resolve=resolve,
            description=graph_field.description,
            deprecation_reason=graph_field.deprecation_reason,
        )

    def to_graphql_argument(param):
        graphql_type = to_graphql_type(param.type)

        if param.has_default and isinstance(graphql_type, graphql.GraphQLNonNull):
            graphql_type = graphql_type.of_type

        return graphql.GraphQLArgument(
            type_=graphql_type,
            default_value=_graphql_default(param),
            description=param.description,
            out_name=param.name,
        )

    graphql_query_type = to_graphql_type(query_type).of_type
    if mutation_type is None:
        graphql_mutation_type = None
    else:
        graphql_mutation_type = to_graphql_type(mutation_type).of_type

    for extra_type in types:
        to_graphql_type(extra_type)

    return Schema(
        query_type=query_type,
        mutation_type=mutation_type,
        types=types,
        graphql_schema=graphql.GraphQLSchema(
            query=graphql_query_type,
            mutation=graphql_mutation_type,
            types=tuple(
                graphql.get_named_type(graphql_type)
                for graphql_type in graphql_types.values()
            ),
        ),
    )


def _check_graphql_field_names(composite):
    entries_by_graphql_name = iterables.to_multidict(
        (snake_case_to_camel_case(entry.field.name), entry)
        for entry in composite.registry
    )
    for graphql_name, entries in entries_by_graphql_name.items():
        if len(entries) > 1:
            raise DuplicateFieldError(
                graphql_name,
                iterables.unique(
                    entry.provider_type.type_name()
                    for entry in entries
                ),
            )


def _graphql_default(graph_param):
    if not graph_param.has_default:
        return graphql.Undefined
    elif isinstance(schema.to_element_type(graph_param.type), schema.InputObjectType):
        # Input object defaults are applied when arguments are bound.
        return graphql.Undefined
    else:
        return graph_param.default


def _dispatch(composite, field_name):
    def resolve(source, info, **args):
        return composite.dispatch(field_name, args, info.context)

    return resolve


def _read_value(field_name):
    def resolve(source, info, **args):
        if isinstance(source, collections.abc.Mapping):
            return source.get(field_name)
        else:
            return getattr(source, field_name, None)

    return resolve
