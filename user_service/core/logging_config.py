# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    resolved = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
    # Driver chatter is only useful when debugging connectivity
    logging.getLogger("pymongo").setLevel(logging.WARNING)
