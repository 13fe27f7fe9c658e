import logging

from app.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging() -> logging.Logger:
    """Configure the 'app' logger once. Child loggers (logging.getLogger(__name__)) propagate to it."""
    logger = logging.getLogger("app")
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if not any(getattr(h, "_app_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._app_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = False
    return logger
