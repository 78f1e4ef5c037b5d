"""Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Token policy and bcrypt cost validated and database initialized on startup via lifespan;
      a ConfigurationError aborts startup before any request is served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Token policy kept on app.state, not a module global: tests override the
      get_token_policy dependency instead of patching modules
    - The session manager is also kept on app.state for the readiness check
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import health, products, users
from storefront.config import Settings, get_settings
from storefront.core.errors import ConfigurationError
from storefront.core.user import check_bcrypt_rounds
from storefront.infrastructure.database import init_db
from storefront.infrastructure.observability import setup_logging
from storefront.infrastructure.token_issuer import JwtTokenIssuer
from storefront.services.authenticate_user import TokenPolicy, build_token_policy

logger = logging.getLogger(__name__)


def create_token_policy(settings: Settings) -> TokenPolicy:
    """Fallible startup step: issuer + TTL from settings."""
    issuer = JwtTokenIssuer(settings.jwt_secret, settings.jwt_algorithm)
    return build_token_policy(issuer, settings.jwt_expires_in)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        app.state.token_policy = create_token_policy(settings)
        check_bcrypt_rounds(settings.bcrypt_rounds)
    except ConfigurationError as e:
        logger.critical(e.message, extra={"error_code": e.code})
        raise
    app.state.db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Storefront API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Storefront API shutting down")


app = FastAPI(
    title="Storefront API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(products.router)
app.include_router(users.router)

register_error_handlers(app)
