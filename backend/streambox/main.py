from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from streambox.config import Settings, settings
from streambox.database import create_db_engine
from streambox.exceptions import CatalogError, ValidationError
from streambox.logger import api_logger, app_logger, db_logger
from streambox.repositories import (
    CatalogRepository,
    InMemoryCatalogRepository,
    SqlCatalogRepository,
)
from streambox.routers import auth, categories, search, users, videos
from streambox.services.catalog_service import CatalogStore
from streambox.services.recommendation_service import RecommendationService
from streambox.services.seed import seed_catalog


def create_repository(config: Settings) -> CatalogRepository:
    """Build the backing store selected by configuration."""
    if config.catalog_backend == "sql":
        db_logger.info("Using SQL catalog backend")
        return SqlCatalogRepository(create_db_engine(config.database_url))
    if config.catalog_backend == "memory":
        return InMemoryCatalogRepository()
    raise ValueError(f"Unknown catalog backend: {config.catalog_backend}")


def create_app(store: CatalogStore | None = None, config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Catalog store to serve; a seeded store is built from config if omitted
        config: Application settings

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log startup and shutdown of the application."""
        app_logger.info(f"Starting {config.app_name}")
        app_logger.info(f"Environment: {config.environment}")
        app_logger.info(f"Catalog backend: {config.catalog_backend}")
        yield
        app_logger.info("Shutting down application")

    app = FastAPI(
        title=config.app_name,
        debug=config.debug,
        lifespan=lifespan,
        docs_url=f"{config.api_prefix}/docs" if not config.is_production else None,
        redoc_url=f"{config.api_prefix}/redoc" if not config.is_production else None,
        openapi_url=f"{config.api_prefix}/openapi.json",
    )

    if store is None:
        store = CatalogStore(
            create_repository(config), default_video_type=config.default_video_type
        )
        if config.seed_catalog:
            seed_catalog(store, config)

    app.state.store = store
    app.state.recommendations = RecommendationService(
        limit=config.recommendation_limit,
        category_weight=config.recommendation_category_weight,
        tag_weight=config.recommendation_tag_weight,
    )
    app.state.max_recommendation_limit = config.max_recommendation_limit

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "PATCH"],
        allow_headers=["*"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if exc.status_code >= 500:
            api_logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            api_logger.debug(
                f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
            )

        content = {"detail": exc.message}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed input is a client error (400), including bad path ids
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request data",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    # Include routers
    app.include_router(videos.router, prefix=config.api_prefix, tags=["Videos"])
    app.include_router(categories.router, prefix=config.api_prefix, tags=["Categories"])
    app.include_router(search.router, prefix=config.api_prefix, tags=["Search"])
    app.include_router(users.router, prefix=config.api_prefix, tags=["Users"])
    app.include_router(auth.router, prefix=config.api_prefix, tags=["Authentication"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app": config.app_name,
            "environment": config.environment,
        }

    @app.get("/health")
    async def health_check():
        """Detailed health check endpoint."""
        catalog_status = "available"
        video_count = category_count = 0
        try:
            video_count = len(app.state.store.list_videos())
            category_count = len(app.state.store.list_categories())
        except Exception as e:
            catalog_status = f"error: {str(e)}"

        return {
            "status": "healthy",
            "app": config.app_name,
            "version": "1.0.0",
            "environment": config.environment,
            "catalog": catalog_status,
            "videos": video_count,
            "categories": category_count,
        }

    return app


app = create_app()
