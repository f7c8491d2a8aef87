import uvicorn

from pdf_browser.config import load_settings
from pdf_browser.logging_setup import setup_logging
from pdf_browser.main import create_app


def main():
    settings = load_settings()
    logger = setup_logging("pdf-browser", settings.log_level)

    app = create_app(settings)
    logger.info("PDF Browser Server starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
