# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the web app with uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    # keep noisy libs readable
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    app = create_app(state)

    logger.info("Serving on http://%s:%s/tasks", settings.host, settings.port)
    # log_config=None: uvicorn records go through the handlers set up above
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
