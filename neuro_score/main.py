"""Console entry point for neuro-score."""

import logging
import sys
from typing import Optional

from neuro_score.config import get_settings

# Libraries that log every statement or request at INFO.
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")


def setup_logging(level: Optional[str] = None):
    """Configure root logging from settings; ``level`` overrides the configured level.

    Logs go to stderr so that ``score --json`` output stays parseable.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not settings.debug_mode:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def main():
    setup_logging()

    from neuro_score.cli.commands import app

    app()


if __name__ == "__main__":
    main()
