"""Small utilities for logging shared across the registry, services and API."""
import logging


def setup_logging(level: int | None = None) -> None:
    """Configure global logging once for the application.

    Args:
        level: Optional logging level. Defaults to ``logging.INFO``.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.basicConfig(level=level or logging.INFO)


def resolve_level(name: str | None) -> int:
    """Translate a level name such as ``"debug"`` into a ``logging`` constant."""
    value = getattr(logging, (name or "INFO").upper(), None)
    return value if isinstance(value, int) else logging.INFO


def logging_function(message: str, level: str = "info") -> None:
    """Unified logging entry used across the project.

    Args:
        message: Text to log.
        level: One of ``"debug"``, ``"info"``, ``"warning"``, ``"error"``,
            or ``"critical"``.
    """
    level_lower = (level or "info").lower()
    if level_lower == "debug":
        logging.debug(message)
    elif level_lower == "warning":
        logging.warning(message)
    elif level_lower == "error":
        logging.error(message)
    elif level_lower == "critical":
        logging.critical(message)
    else:
        logging.info(message)
