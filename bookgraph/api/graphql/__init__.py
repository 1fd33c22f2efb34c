"""GraphQL schema and router."""

from bookgraph.api.graphql.schema import schema
from bookgraph.api.graphql.router import create_graphql_router

__all__ = ["schema", "create_graphql_router"]
