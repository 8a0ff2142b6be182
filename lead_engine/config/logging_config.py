"""
Logging setup for the Lead Scoring Engine
"""

import logging
from typing import Optional

from .settings import API_CONFIG

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure root logging once for the service process"""
    level_name = (log_level or API_CONFIG["log_level"]).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger("lead_engine").debug("Logging configured at %s", level_name)
