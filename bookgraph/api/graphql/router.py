"""FastAPI mounting for the GraphQL schema."""

from typing import Annotated

from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from bookgraph.api.graphql.schema import schema
from bookgraph.config import Settings
from bookgraph.core.catalog import ResolverSet, get_resolver_set


async def get_context(
    resolvers: Annotated[ResolverSet, Depends(get_resolver_set)],
) -> dict:
    """Expose the catalog to resolvers as ``info.context["resolvers"]``."""
    return {"resolvers": resolvers}


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """Build the router; include it under ``settings.graphql_path``."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
