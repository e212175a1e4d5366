from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smart_news import __version__
from smart_news.api.routes.health import health_router
from smart_news.api.routes.search import search_router
from smart_news.config.settings import settings
from smart_news.exceptions import ConfigurationError, SmartNewsError
from smart_news.utils.logger import logger, setup_logger


def create_app():
    setup_logger()  # Ensure logger is set up before FastAPI app initialization
    logger.info(f"Starting {settings.APP_NAME} FastAPI application...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="AI search, fact-check and topic analysis",
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(search_router, prefix="/api")

    @app.exception_handler(SmartNewsError)
    async def upstream_error_handler(request: Request, exc: SmartNewsError):
        logger.error(f"{request.url.path} failed: {exc}")
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error(f"Service misconfigured: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    # Handlers are matched on the exception's MRO, so ConfigurationError never lands here
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


app = create_app()
