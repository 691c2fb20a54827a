"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the study page.
Environment variables are loaded from .env file.
"""

import logging
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

from studyprompts.config import AppSettings, get_settings  # noqa: E402

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the upload routes, NiceGUI serves the page at "/".
    """
    import uvicorn
    from nicegui import ui

    from studyprompts.api.app import create_app
    from studyprompts.ui.study_page import study_page  # noqa: F401 - Registers the page

    settings = get_settings()
    configure_logging(settings)

    app = create_app(settings)
    ui.run_with(app, title="Study Prompts")

    logger.info(f"Starting server on http://{settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
