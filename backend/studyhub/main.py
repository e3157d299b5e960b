import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studyhub.core.config import Settings, settings
from studyhub.core.database import EntityStore
from studyhub.routers import auth_router, chat_router, group_router, meeting_router, note_router
from studyhub.services.chat_relay import ChatRelay

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            # loc holds a character offset, not a field
            errors.append({"field": None, "message": error.get("msg")})
            continue
        # drop the "body"/"path"/"query" prefix
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({"field": ".".join(location) or None, "message": error.get("msg")})
    return errors


def create_app(app_settings: Optional[Settings] = None, store: Optional[EntityStore] = None) -> FastAPI:
    """Build the application around one entity store and one chat relay."""
    app_settings = app_settings or settings
    store = store or EntityStore(app_settings.DATABASE_URL)
    store.create_all()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup")
        yield
        logger.info("Application shutdown")
        store.dispose()

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Study groups, meetings, shared notes and group chat",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.chat_relay = ChatRelay(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _field_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(auth_router.router, prefix="/api")
    app.include_router(group_router.router, prefix="/api")
    app.include_router(meeting_router.router, prefix="/api")
    app.include_router(note_router.router, prefix="/api")
    app.add_api_websocket_route(app_settings.WS_PATH, chat_router.chat_socket)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()


def run():
    uvicorn.run("studyhub.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
