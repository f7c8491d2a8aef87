import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse

from pdf_browser.errors import BadRequest, StoreError, StoreUnavailable
from pdf_browser.models import ErrorResponse, FileListResponse
from pdf_browser.services.s3_service import S3Store

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def get_store(request: Request) -> S3Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailable("Object store is not initialized; start the app through its lifespan")
    return store


@router.get("/list", response_model=FileListResponse, responses=_ERROR_RESPONSES)
def list_files(prefix: str = "", store: S3Store = Depends(get_store)):
    try:
        files = store.list_files(prefix)
    except StoreError:
        logger.error("Error listing files (prefix=%r)", prefix)
        return JSONResponse(status_code=500, content={"error": "Failed to list PDF files"})

    return FileListResponse(files=files, count=len(files))


@router.get(
    "/get",
    response_class=StreamingResponse,
    responses={400: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
def get_file(key: Optional[str] = None, store: S3Store = Depends(get_store)):
    if not key:
        raise BadRequest("File key is required")

    try:
        stream = store.open_file_stream(key)
    except StoreError:
        logger.error("Error getting file %r", key)
        return JSONResponse(status_code=500, content={"error": "Failed to get PDF file"})

    return StreamingResponse(stream, media_type=stream.content_type, headers=stream.headers)
