"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from bookgraph.api.graphql import create_graphql_router
from bookgraph.api.routes import health_router
from bookgraph.config import get_settings
from bookgraph.utils.logging import setup_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(debug=settings.debug)
    yield


app = FastAPI(
    title=settings.app_name,
    description="In-memory book catalog with a GraphQL API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, endpoint="/metrics")

# Include routers
app.include_router(health_router)
app.include_router(create_graphql_router(settings), prefix=settings.graphql_path)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
        "health": "/health",
        "graphql": settings.graphql_path,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookgraph.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
