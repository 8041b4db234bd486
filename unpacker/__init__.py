"""
Fallback decoder for archive and compressed payloads.

Given an opaque byte stream that may be a plain tar archive, a gzip-compressed
tar archive, a gzip-compressed plain stream or raw bytes, tries a configured
list of decoding methods in order and returns the payload of the first one
that succeeds.

Methods:
    - gzip+tar: contents of regular files in a gzip-compressed tar archive
    - tar: contents of regular files in an uncompressed tar archive
    - gzip: inflated gzip stream
    - identity: content unchanged (always succeeds, must be last)

Example:
    >>> from unpacker import FallbackDecoder, resolve_methods
    >>> decoder = FallbackDecoder(resolve_methods(["gzip+tar", "tar", "gzip", "identity"]))
    >>> decoder.decode(b"not an archive")
    b'not an archive'
"""

__version__ = "0.1.0"

# Import key components for convenience
from .errors import (
    UnpackerError,
    ReadError,
    StrategyError,
    NotGzipError,
    MalformedArchiveError,
    DecompressionError,
    NoMatchingStrategyError,
    UnknownMethodError,
)
from .methods import (
    Method,
    METHODS,
    DEFAULT_ORDER,
    decode_tar,
    decode_gzip_tar,
    decode_gzip,
    decode_identity,
    parse_method_names,
    resolve_methods,
)
from .decoder import FallbackDecoder, read_snapshot

__all__ = [
    "UnpackerError",
    "ReadError",
    "StrategyError",
    "NotGzipError",
    "MalformedArchiveError",
    "DecompressionError",
    "NoMatchingStrategyError",
    "UnknownMethodError",
    "Method",
    "METHODS",
    "DEFAULT_ORDER",
    "decode_tar",
    "decode_gzip_tar",
    "decode_gzip",
    "decode_identity",
    "parse_method_names",
    "resolve_methods",
    "FallbackDecoder",
    "read_snapshot",
]
