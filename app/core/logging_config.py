# app/core/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Send application logs to stderr at ``level``."""
    root = logging.getLogger()
    if not any(getattr(h, "_kanban_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._kanban_handler = True
        root.addHandler(handler)
    root.setLevel(level.upper())
