import re
from datetime import datetime
from typing import Dict, Iterator, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

PDF_MEDIA_TYPE = "application/pdf"
CACHE_CONTROL = "public, max-age=3600"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class StoredFile(BaseModel):
    """Store metadata for one object, as seen at list time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    last_modified: datetime = Field(alias="lastModified")
    size: int = Field(ge=0)
    etag: str


class FileListResponse(BaseModel):
    files: List[StoredFile]
    count: int


class ErrorResponse(BaseModel):
    error: str


def display_name(key: str) -> str:
    return key.rsplit("/", 1)[-1]


def content_disposition(filename: str) -> str:
    """Build an inline Content-Disposition header value for *filename*.

    Control characters never reach the header. Names that are not plain
    printable ASCII get an ASCII fallback plus an RFC 5987 ``filename*``.
    """
    printable = _CONTROL_CHARS.sub("_", filename)
    escaped = printable.replace("\\", "\\\\").replace('"', '\\"')
    if filename.isascii() and printable == filename:
        return f'inline; filename="{escaped}"'

    fallback = escaped.encode("ascii", "replace").decode("ascii")
    encoded = quote(filename, safe="")
    return f"inline; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


class FileStream:
    """A PDF body read from the store plus the headers it is served with."""

    def __init__(self, key: str, chunks: Iterator[bytes], content_length: Optional[int] = None):
        self.key = key
        self.chunks = chunks
        self.content_length = content_length
        self.content_type = PDF_MEDIA_TYPE
        self.filename = display_name(key)

    def __iter__(self):
        return iter(self.chunks)

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "Content-Disposition": content_disposition(self.filename),
            "Cache-Control": CACHE_CONTROL,
        }
        if self.content_length is not None:
            headers["Content-Length"] = str(self.content_length)
        return headers
