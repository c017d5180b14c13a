"""
Logging configuration with request_id and timer context.
"""
import logging
import sys
from typing import Optional


class ContextFormatter(logging.Formatter):
    """Formatter that includes request_id and timer name when available."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record, inserting context tags before the message."""
        formatted = super().format(record)
        
        tags = []
        if getattr(record, "request_id", None):
            tags.append(f"[{record.request_id}]")
        if getattr(record, "timer", None):
            tags.append(f"[timer={record.timer}]")
        
        if not tags:
            return formatted
        
        # Format: timestamp - name - level - [request_id] [timer=...] - message
        context = " ".join(tags)
        parts = formatted.split(" - ", 3)
        if len(parts) >= 4:
            return f"{parts[0]} - {parts[1]} - {parts[2]} - {context} - {parts[3]}"
        return f"{context} {formatted}"


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Setup application logging configuration.
    
    Args:
        log_level: Logging level (defaults to INFO)
        log_format: Log format string (defaults to readable format with context)
    """
    level = log_level or "INFO"
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    
    if log_format:
        formatter = logging.Formatter(log_format)
    else:
        formatter = ContextFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    
    console_handler.setFormatter(formatter)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("fastapi").setLevel(logging.INFO)
    
    # Request logging is done by our own middleware
    logging.getLogger("uvicorn.access").propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)
