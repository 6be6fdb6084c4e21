from __future__ import annotations

import logging

from eventcal.infrastructure.config import settings


def configure_logging(level: str | None = None) -> None:
    """Send application logs to stderr at `level`, or at the configured log level."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
