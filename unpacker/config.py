"""
Configuration module for the unpacker service.

Loads all configuration from environment variables with sensible defaults.
"""

import os

from .methods import DEFAULT_ORDER, parse_method_names


class Config:
    """
    Unpacker configuration from environment variables.

    All settings can be overridden by setting the corresponding environment variable.
    """

    def __init__(self):
        """
        Initialize configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO
            FLASK_HOST: Server bind address. Default: 0.0.0.0
            FLASK_PORT: Server bind port. Default: 8080
            DECODE_METHODS: Comma separated method order. Default: gzip+tar,tar,gzip,identity
            MAX_CONTENT_LENGTH: Maximum request body in bytes. Default: 67108864 (64 MiB)
            CACHE_SIZE: Number of decoders cached per method order. Default: 16
            MAX_METHODS_LENGTH: Maximum length of the methods query parameter. Default: 128
        """
        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Server
        self.FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
        self.FLASK_PORT = int(os.getenv("FLASK_PORT", "8080"))

        # Decoding
        self.DECODE_METHODS = os.getenv("DECODE_METHODS", ",".join(DEFAULT_ORDER))
        self.MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(64 * 1024 * 1024)))

        # Cache
        self.CACHE_SIZE = int(os.getenv("CACHE_SIZE", "16"))

        # Validation limits
        self.MAX_METHODS_LENGTH = int(os.getenv("MAX_METHODS_LENGTH", "128"))

    @property
    def methods(self) -> tuple[str, ...]:
        """Configured method order as a tuple of names."""
        return parse_method_names(self.DECODE_METHODS)

    def __repr__(self):
        """String representation for logging."""
        return (
            f"Config(LOG_LEVEL={self.LOG_LEVEL}, "
            f"FLASK_HOST={self.FLASK_HOST}, "
            f"FLASK_PORT={self.FLASK_PORT}, "
            f"DECODE_METHODS={self.DECODE_METHODS}, "
            f"MAX_CONTENT_LENGTH={self.MAX_CONTENT_LENGTH}, "
            f"CACHE_SIZE={self.CACHE_SIZE})"
        )


# Global config instance
config = Config()
