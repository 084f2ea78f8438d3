"""
Centralized logging configuration.

Suppresses verbose warnings from third-party document processing and HTTP
libraries that would otherwise flood logs with non-actionable messages.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Suppress verbose third-party library warnings
_SUPPRESSED_LOGGERS = [
    'pypdfium2',
    'PIL',
    'pptx',
    'openpyxl',
    'qdrant_client',
    'httpx',
    'httpcore',
    'urllib3',
]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    for logger_name in _SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
