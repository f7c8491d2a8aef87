class PdfBrowserError(Exception):
    """Base class for errors raised by the PDF browser."""


class BadRequest(PdfBrowserError):
    """A required request parameter is missing or invalid."""


class StoreError(PdfBrowserError):
    """The object store could not serve the request."""


class StoreUnavailable(StoreError):
    """Network, auth or service error from the object store."""


class ObjectNotFound(StoreError):
    """The store has no content for the requested key."""

    def __init__(self, key: str):
        super().__init__(f"No object stored under key {key!r}")
        self.key = key
