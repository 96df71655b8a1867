# Licensed under the Apache License, Version 2.0
import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "STRPATH_LOG_LEVEL"


def setup_logging(level_name: Optional[str] = None) -> None:
    """Configure root logging once; `level_name` overrides $STRPATH_LOG_LEVEL."""
    level_name = (level_name or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)
