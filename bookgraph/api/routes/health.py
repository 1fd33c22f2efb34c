"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookgraph.core.catalog import ResolverSet, get_resolver_set

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    resolvers: Annotated[ResolverSet, Depends(get_resolver_set)],
) -> dict:
    """Readiness check - verifies the catalog is loaded."""
    return {
        "status": "ready",
        "books": len(resolvers.store),
        "authors": len(resolvers.authors),
        "subscribers": resolvers.events.subscriber_count,
        "id_strategy": resolvers.store.id_strategy,
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
