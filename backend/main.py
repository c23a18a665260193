import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.message import router as message_router
from api.routes.system import router as system_router
from logging_setup import configure_logging
from message_service import MessageService
from settings import Settings, get_settings, validate_settings


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    validate_settings(settings)
    configure_logging(settings)

    app = FastAPI(title=settings.app_title)
    app.state.message_service = MessageService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(message_router, prefix="/message")

    logger.info("Created %s with %d CORS origin(s).", settings.app_title, len(settings.cors_origins))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)
