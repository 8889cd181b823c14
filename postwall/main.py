"""
Main FastAPI application for the Postwall API.
Serves health, posts (paywalled detail), me, dev affordances and metrics.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from postwall.api.error_handlers import register_error_handlers
from postwall.api.middleware import register_request_logging
from postwall.api.routes import dev, health, me, posts
from postwall.core.config import settings
from postwall.core.logging import configure_logging
from postwall.db.session import engine as default_engine, init_db
from postwall.identity.provider import FirebaseIdentityProvider, IdentityProvider
from postwall.identity.verifier import IdentityVerifier
from postwall.utils.metrics import router as metrics_router

DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]


def create_app(
    identity_provider: IdentityProvider | None = None,
    engine: Engine | None = None,
) -> FastAPI:
    """
    Build the app with explicit collaborator handles.
    Defaults: identity provider from settings, engine from postwall.db.session.
    """
    configure_logging()

    bind = engine if engine is not None else default_engine
    provider = identity_provider or FirebaseIdentityProvider.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(bind)
        yield

    app = FastAPI(
        title="Postwall API",
        description="Posts with a subscription paywall on post detail",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.identity_verifier = IdentityVerifier(provider)
    app.state.session_factory = sessionmaker(bind=bind, autocommit=False, autoflush=False)

    # CORS
    origins = settings.cors_origins_list or DEFAULT_CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)
    register_error_handlers(app)

    # Routers
    app.include_router(health.router, tags=["health"])
    app.include_router(posts.router)
    app.include_router(me.router)
    if settings.dev_routes_enabled:
        app.include_router(dev.router)
    app.include_router(metrics_router)
    return app


app = create_app()
