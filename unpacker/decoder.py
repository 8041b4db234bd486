"""
Fallback decoder.

Tries a configured, ordered list of decoding methods against the same content
and returns the output of the first method that succeeds.
"""

import io
import logging

from .errors import NoMatchingStrategyError, ReadError, StrategyError
from .methods import Method

logger = logging.getLogger(__name__)


def read_snapshot(source) -> bytes:
    """
    Read a source completely into an immutable bytes snapshot.

    Args:
        source: Binary file-like object with read(), or bytes-like content

    Returns:
        All bytes of the source

    Raises:
        ReadError: If reading fails or does not produce bytes
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    try:
        content = source.read()
    except (OSError, ValueError) as e:
        raise ReadError(f"failed to read source: {e}") from e

    if not isinstance(content, (bytes, bytearray)):
        raise ReadError(f"source must produce bytes, got {type(content).__name__}")
    return bytes(content)


class FallbackDecoder:
    """
    Decode content by trying methods in order until one succeeds.

    The method order is fixed at construction. Place specific formats before
    generic ones: the identity method always succeeds, so any method after it
    is never reached.

    Example:
        >>> from unpacker.methods import resolve_methods
        >>> decoder = FallbackDecoder(resolve_methods(["gzip+tar", "tar", "identity"]))
        >>> decoder.decode(b"not an archive")
        b'not an archive'
    """

    def __init__(self, methods):
        self._methods = tuple(methods)
        for method in self._methods:
            if not isinstance(method, Method):
                raise TypeError(f"Expected Method, got {type(method).__name__}")

        names = self.method_names
        if "identity" in names[:-1]:
            logger.warning(
                f"Identity method is not last in {list(names)}; methods after it are unreachable"
            )

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(method.name for method in self._methods)

    def decode_with_method(self, source) -> tuple[str, bytes]:
        """
        Decode a source and report which method produced the payload.

        Args:
            source: Binary file-like object or bytes-like content. It is read
                once and never closed.

        Returns:
            Tuple of (method_name, payload)

        Raises:
            ReadError: If the source could not be read; no method is tried
            NoMatchingStrategyError: If every configured method failed
        """
        content = read_snapshot(source)
        logger.debug(f"Read {len(content)} bytes, trying {len(self._methods)} methods")

        tried = []
        for method in self._methods:
            logger.info(f"Trying decode method '{method.name}'")
            tried.append(method.name)
            try:
                payload = method.decode(io.BytesIO(content))
            except StrategyError as e:
                logger.debug(f"Method '{method.name}' failed, trying next: {e}")
                continue

            logger.info(f"Decoded with method '{method.name}': {len(payload)} bytes")
            return method.name, payload

        logger.warning(f"No decode method matched the content (tried: {', '.join(tried) or 'none'})")
        raise NoMatchingStrategyError(tried)

    def decode(self, source) -> bytes:
        """Decode a source and return the payload of the first matching method."""
        _, payload = self.decode_with_method(source)
        return payload

    def __repr__(self):
        return f"FallbackDecoder(methods={list(self.method_names)})"
