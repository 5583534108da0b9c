from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_service.api.fastapi.middleware.errors.catchall import CatchAllExceptionMiddleware
from content_service.api.fastapi.middleware.errors.handlers import register_error_handlers
from content_service.api.fastapi.middleware.request_size_limit import RequestSizeLimitMiddleware
from content_service.api.fastapi.routers import register_all_routers
from content_service.api.fastapi.settings import ApiConfig
from content_service.app import CURRENT_ENVIRONMENT
from content_service.app.settings import AppSettings, get_app_settings
from content_service.auth.settings import AuthSettings, get_auth_settings
from content_service.auth.validator import HttpTokenValidator, TokenValidator
from content_service.db.nosql.base import StorageHandler
from content_service.db.nosql.handler import MongoStorageHandler, create_mongo_client
from content_service.db.nosql.settings import MongoSettings, get_mongo_settings

logger = logging.getLogger(__name__)


def _make_lifespan(
        mongo_settings: MongoSettings | None,
        auth_settings: AuthSettings | None,
):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with AsyncExitStack() as stack:
            # collaborators injected at construction time are owned by the caller
            if app.state.storage is None:
                settings = mongo_settings or get_mongo_settings()
                client = create_mongo_client(settings)
                stack.callback(setattr, app.state, "storage", None)
                stack.callback(client.close)
                app.state.storage = MongoStorageHandler(client, settings)
                logger.info("Using database '%s' for file storage", settings.resolved_database)
            if app.state.token_validator is None:
                validator = HttpTokenValidator(auth_settings or get_auth_settings())
                stack.callback(setattr, app.state, "token_validator", None)
                stack.push_async_callback(validator.aclose)
                app.state.token_validator = validator
            yield
            logger.info("Shutting down, closing collaborator clients")

    return lifespan


def create_app(
        *,
        app_settings: AppSettings | None = None,
        api_config: ApiConfig | None = None,
        mongo_settings: MongoSettings | None = None,
        auth_settings: AuthSettings | None = None,
        storage: StorageHandler | None = None,
        token_validator: TokenValidator | None = None,
) -> FastAPI:
    """
    Build the content-service application.

    Storage and token validation default to Mongo/GridFS and the HTTP login
    service, created on startup from settings. Pass `storage` or
    `token_validator` to use another implementation (tests, local runs).
    """
    app_settings = app_settings or get_app_settings()
    api_config = api_config or ApiConfig()

    app = FastAPI(
        title=app_settings.name,
        version=app_settings.version,
        lifespan=_make_lifespan(mongo_settings, auth_settings),
    )
    app.state.settings = app_settings
    app.state.storage = storage
    app.state.token_validator = token_validator

    # Error handling (innermost; CORS is added last and wraps it)
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)

    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=app_settings.max_upload_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins or app_settings.cors_origins,
        allow_methods=api_config.cors_methods,
        allow_headers=api_config.cors_headers,
    )

    register_all_routers(app, base_package="content_service.api.fastapi.routers")

    logger.info(f"{app_settings.version} version of {app_settings.name} initialized [env: {CURRENT_ENVIRONMENT}]")
    return app


__all__ = ["ApiConfig", "create_app"]
