"""gfind Logging — logging port and structlog adapter."""

from gfind.logging.port import LoggingPort
from gfind.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
