import logging

import sentry_sdk
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from easybizness_mail.api.router import api_router
from easybizness_mail.core.config import Settings, get_settings
from easybizness_mail.core.limiter import configure_limiter
from easybizness_mail.core.logging import setup_logging
from easybizness_mail.middleware.request_id import REQUEST_ID_HEADER, RequestIdMiddleware
from easybizness_mail.services.mail_transport import MailTransport, build_transport

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, transport: MailTransport | None = None) -> FastAPI:
    """Build the mail API.

    ``transport`` overrides the one derived from settings, which is how tests
    run without a network.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    # Initialize Sentry error monitoring
    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            environment=settings.APP_ENV,
            send_default_pii=False,
        )
        logger.info("Sentry initialized")

    app = FastAPI(
        title="EasyBizness Mail API",
        version="0.1.0",
        docs_url="/api/docs" if settings.APP_ENV != "production" else None,
        redoc_url="/api/redoc" if settings.APP_ENV != "production" else None,
    )

    app.state.settings = settings
    app.state.transport = transport or build_transport(settings)
    app.state.limiter = configure_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(RequestIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid request body: %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception: %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        # runs outside RequestIdMiddleware, so the header is stamped here
        headers = {}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id
        return JSONResponse(status_code=500, content={"error": "Internal server error"}, headers=headers)

    # ─── Routers ───
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "env": settings.APP_ENV, "mail_enabled": settings.MAIL_ENABLED}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on 0.0.0.0:$PORT."""
    settings = get_settings()
    logger.info("Email API listening on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
