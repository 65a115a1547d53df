import logging
from fastapi import FastAPI
from lipi.api.routes import router as api_router
from lipi.core.config import settings
from lipi.core.logging import configure_logging
from lipi.middleware.request_id import RequestIDMiddleware
from lipi.middleware.metrics import MetricsMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Lipi bilingual name runner", version="1.0.0")

    # added last runs first: request ids are set before metrics read them
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logging.info(
        "lipi_config max_text_len=%d max_options=%d cache_max_size=%d",
        settings.MAX_TEXT_LEN,
        settings.MAX_OPTIONS,
        settings.CACHE_MAX_SIZE,
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
