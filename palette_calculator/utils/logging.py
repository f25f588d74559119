"""
Palette Calculator Structured Logging
loguru sink setup and a small wrapper that attaches context to records.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from palette_calculator.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


def configure_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default handler with the palette stdout sink."""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level or config.LOG_LEVEL, serialize=False)


class StructuredLogger:
    """
    Logger carrying a fixed context (for example a request id) that is merged
    into every record alongside the per-call ``extra`` data.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        self.context = dict(context or {})

    def bind(self, **context: Any) -> "StructuredLogger":
        """Child logger with additional context."""
        return StructuredLogger({**self.context, **context})

    def _emit(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        fields = {**self.context, **(extra or {})}
        # depth=2 reports the caller of info()/error(), not this helper
        logger.bind(**fields).opt(depth=2).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._emit("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._emit("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._emit("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._emit("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance, configuring the sink on first use."""
    global _logger
    if _logger is None:
        configure_logging()
        _logger = StructuredLogger()
    return _logger
