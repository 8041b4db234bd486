"""
HTTP service decoding archive and compressed payloads.

POST a body to /v1/decode and receive the decoded payload. The body may be a
tar archive, a gzip-compressed tar archive, a gzip-compressed stream or raw
bytes; configured decode methods are tried in order and the first that
succeeds wins.

Endpoints:
    - GET /v1/ - Version check, lists configured methods
    - POST /v1/decode[?methods=a,b,c] - Decode request body

Environment Variables:
    LOG_LEVEL, FLASK_HOST, FLASK_PORT, DECODE_METHODS, MAX_CONTENT_LENGTH,
    CACHE_SIZE, MAX_METHODS_LENGTH

Example:
    $ LOG_LEVEL=DEBUG python app.py
    $ tar czf - notes.txt | curl --data-binary @- localhost:8080/v1/decode
"""

import logging
import sys

from unpacker.config import config
from unpacker.errors import UnknownMethodError
from unpacker.methods import resolve_methods
from unpacker.routes import app

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point for the unpacker application."""
    debug_mode = logger.getEffectiveLevel() == logging.DEBUG
    logger.info(f"Starting unpacker service on {config.FLASK_HOST}:{config.FLASK_PORT}")
    logger.info(f"Configuration: {config}")
    logger.info(f"Log level: {logging.getLevelName(logger.getEffectiveLevel())}")

    try:
        resolve_methods(config.methods)
    except UnknownMethodError as e:
        logger.error(f"Invalid DECODE_METHODS: {e}")
        sys.exit(1)

    if debug_mode:
        logger.info("Flask debug mode enabled")
    app.run(host=config.FLASK_HOST, port=config.FLASK_PORT, debug=debug_mode)


if __name__ == "__main__":
    main()
