import contextlib

import graphql

from ..context import RequestContext
from .schema import create_graphql_schema


async def execute(document_text, *, query_type, mutation_type=None, types=None, context=None, variables=None):
    return await executor(
        query_type=query_type,
        mutation_type=mutation_type,
        types=types,
    )(document_text, context=context, variables=variables)


def execute_sync(document_text, *, query_type, mutation_type=None, types=None, context=None, variables=None):
    return sync_executor(
        query_type=query_type,
        mutation_type=mutation_type,
        types=types,
    )(document_text, context=context, variables=variables)


def executor(*, query_type, mutation_type=None, types=None):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type, types=types)

    async def execute(document_text, *, context=None, variables=None, operation_name=None):
        async with _request(context) as request:
            return await graphql.graphql(
                graphql_schema.graphql_schema,
                document_text,
                context_value=request,
                variable_values=variables,
                operation_name=operation_name,
            )

    execute.schema = graphql_schema

    return execute


def sync_executor(*, query_type, mutation_type=None, types=None):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type, types=types)

    def execute(document_text, *, context=None, variables=None, operation_name=None):
        with _request(context) as request:
            return graphql.graphql_sync(
                graphql_schema.graphql_schema,
                document_text,
                context_value=request,
                variable_values=variables,
                operation_name=operation_name,
            )

    execute.schema = graphql_schema

    return execute


def _request(context):
    if isinstance(context, RequestContext):
        # The caller owns this request and releases it.
        return contextlib.nullcontext(context)
    else:
        return RequestContext(context)


__all__ = [
    "create_graphql_schema",
    "execute",
    "execute_sync",
    "executor",
    "sync_executor",
]
