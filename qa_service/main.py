"""
Application entry point.

Creates the FastAPI application and wires together:
- The in-memory store, seeded from the questions fixture
- Routers (health, questions)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (CORS policy, security headers, rate limiting)
- Logging configuration

ASGI servers build the app through the factory:

    uvicorn qa_service.main:create_app --factory

No business logic belongs here.
"""

import logging

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from qa_service.core.config import Settings, settings as default_settings
from qa_service.infrastructure.qa.memory_store import InMemoryQAStore
from qa_service.infrastructure.qa.seed import load_seed_questions
from qa_service.interfaces.health import router as health_router
from qa_service.interfaces.qa.router import router as questions_router
from qa_service.shared.errors.handlers import register_error_handlers
from qa_service.shared.logging import configure_logging
from qa_service.shared.security.cors import ForbiddingCORSMiddleware
from qa_service.shared.security.headers import SecurityHeadersMiddleware
from qa_service.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Builds the store once and attaches it to ``app.state``; routes reach
    it through dependency providers. This is the composition root of
    the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, trace_store=settings.trace_store)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Store ---
    app.state.store = InMemoryQAStore(questions=load_seed_questions(settings.seed_path))

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        default_limit=settings.rate_limit_default,
        enabled=settings.rate_limit_enabled,
    )
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    # Added last so it wraps CORS rejections too
    app.add_middleware(
        ForbiddingCORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(questions_router)

    logger.info("%s %s ready", settings.project_name, settings.version)
    return app
