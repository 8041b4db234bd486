"""
Exception hierarchy for the fallback decoder.

Callers of FallbackDecoder.decode() only ever see ReadError or
NoMatchingStrategyError. StrategyError subclasses are raised by individual
decoding methods and are consumed by the decoder's fallback loop.
"""


class UnpackerError(Exception):
    """Base class for all unpacker errors."""


class ReadError(UnpackerError):
    """The source stream could not be fully read into memory."""


class StrategyError(UnpackerError):
    """A single decoding method could not handle its input."""


class NotGzipError(StrategyError):
    """Input does not start with a valid gzip header."""


class MalformedArchiveError(StrategyError):
    """Tar structure is missing or corrupt."""


class DecompressionError(StrategyError):
    """Gzip header was valid but the compressed body is corrupt or truncated."""


class NoMatchingStrategyError(UnpackerError):
    """
    None of the configured methods could decode the content.

    Only the names of the methods tried are kept, never the reasons they failed.
    """

    def __init__(self, methods):
        self.methods = tuple(methods)
        super().__init__(
            "none of the configured methods were able to decode the content "
            f"(tried: {', '.join(self.methods) or 'none'})"
        )


class UnknownMethodError(UnpackerError, ValueError):
    """A configured method name is not registered or is listed twice."""
