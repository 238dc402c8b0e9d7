# Configuration package

from srfax.core.config.app_config import ClientConfig, LoggingConfig, LogLevel

__all__ = [
    "ClientConfig",
    "LogLevel",
    "LoggingConfig",
]
