"""
Input validation module for the unpacker service.

Provides digest computation and validation of request parameters.
"""

import hashlib
import logging
import re
from flask import abort

from .config import config
from .errors import UnknownMethodError
from .methods import parse_method_names, resolve_methods

logger = logging.getLogger(__name__)


def compute_sha256(data: bytes) -> str:
    """
    Compute SHA256 digest in OCI/Docker format.

    Args:
        data: Bytes to hash

    Returns:
        String in format "sha256:<64 hex chars>"

    Example:
        >>> compute_sha256(b"hello")
        'sha256:2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    h = hashlib.sha256()
    h.update(data)
    return "sha256:" + h.hexdigest()


def validate_methods_param(value: str) -> tuple[str, ...]:
    """
    Validate a per-request method order.

    Args:
        value: Comma separated method names (e.g., "gzip+tar,tar,identity")

    Returns:
        Tuple of method names in the requested order

    Raises:
        HTTPException: 400 Bad Request if the value is invalid

    Validation Rules:
        - Must be 1-{MAX_METHODS_LENGTH} characters (configurable)
        - Only lowercase letters, plus signs (+), commas (,) and spaces
        - Every name must be a registered method, listed at most once
    """
    if not value or len(value) > config.MAX_METHODS_LENGTH:
        logger.warning(f"Invalid methods length: {len(value)}")
        abort(400, f"Invalid methods: must be 1-{config.MAX_METHODS_LENGTH} characters")

    if not re.fullmatch(r'[a-z+, ]+', value):
        logger.warning(f"Invalid methods format: {value}")
        abort(400, "Invalid methods: only lowercase letters, plus signs, commas and spaces allowed")

    names = parse_method_names(value)
    if not names:
        logger.warning(f"No method names in: {value!r}")
        abort(400, "Invalid methods: at least one method name required")

    try:
        resolve_methods(names)
    except UnknownMethodError as e:
        logger.warning(f"Invalid methods: {e}")
        abort(400, f"Invalid methods: {e}")

    logger.debug(f"Methods validated: {names}")
    return names
