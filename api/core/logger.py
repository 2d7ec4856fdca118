import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConsoleHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can detect its own handler on reload."""


def setup_logging(level: str = "INFO") -> None:
    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Avoid duplicate handlers if reloaded
    if not any(isinstance(h, ConsoleHandler) for h in root_logger.handlers):
        root_logger.addHandler(handler)

    # Configure specific loggers
    for logger_name in ("api", "workflows", "fastapi"):
        logging.getLogger(logger_name).setLevel(level.upper())
