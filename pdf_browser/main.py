import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from pdf_browser import __version__
from pdf_browser.config import Settings, load_settings
from pdf_browser.errors import BadRequest, StoreError
from pdf_browser.routes.files import router as files_router
from pdf_browser.services.s3_service import S3Store

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(settings: Optional[Settings] = None, store: Optional[S3Store] = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = getattr(app.state, "store", None) is None
        if owned:
            app.state.store = S3Store.from_settings(settings)
        logger.info("Serving PDFs from bucket %s (%s)", app.state.store.bucket, settings.aws_region)
        try:
            yield
        finally:
            if owned:
                app.state.store.client.close()
                app.state.store = None

    app = FastAPI(title="PDF Browser", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    # -------------------------------
    # CORS, only when origins are configured
    # -------------------------------
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.exception_handler(BadRequest)
    async def bad_request_handler(request: Request, exc: BadRequest):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Object store is not available"})

    app.include_router(files_router, prefix="/api/file")

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "pdf-browser", "bucket": settings.bucket_name}

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    return app
