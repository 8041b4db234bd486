"""
Decoding methods for the fallback decoder.

Each method is a plain function taking a readable binary view and returning the
decoded payload bytes, or raising a StrategyError subclass. Methods keep no
state and can be shared between decoders and threads.
"""

import gzip
import io
import logging
import tarfile
import zlib
from typing import BinaryIO, Callable, NamedTuple

from .errors import (
    DecompressionError,
    MalformedArchiveError,
    NotGzipError,
    UnknownMethodError,
)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
GZIP_DEFLATE = b"\x08"

ZERO_BLOCK = tarfile.NUL * tarfile.BLOCKSIZE


class Method(NamedTuple):
    """A named decoding function."""

    name: str
    decode: Callable[[BinaryIO], bytes]


def _open_gzip(view: BinaryIO) -> gzip.GzipFile:
    # GzipFile only validates the header on first read and returns b"" for
    # empty input, so check the magic and compression method bytes up front.
    header = view.read(len(GZIP_MAGIC) + len(GZIP_DEFLATE))
    if header[:len(GZIP_MAGIC)] != GZIP_MAGIC:
        raise NotGzipError("requires gzip-compressed body")
    if header[len(GZIP_MAGIC):] != GZIP_DEFLATE:
        raise NotGzipError("unsupported gzip compression method")
    view.seek(0)
    return gzip.GzipFile(fileobj=view, mode="rb")


def _inflate(view: BinaryIO) -> bytes:
    with _open_gzip(view) as stream:
        try:
            return stream.read()
        except (OSError, EOFError, zlib.error) as e:
            raise DecompressionError(f"failed to uncompress: {e}") from e


def _check_end_of_archive(content: bytes, offset: int) -> None:
    """
    Verify that tar parsing stopped at a real end of archive.

    tarfile silently stops at the first unreadable header after the first
    member. The archive only ended cleanly if no data is left at the stop
    offset, or if the end marker (zero blocks) starts there.
    """
    first = content[offset:offset + tarfile.BLOCKSIZE]
    if not first:
        return
    second = content[offset + tarfile.BLOCKSIZE:offset + 2 * tarfile.BLOCKSIZE]
    if first != ZERO_BLOCK:
        raise MalformedArchiveError(f"invalid header in tar at offset {offset}")
    if second and second != ZERO_BLOCK:
        raise MalformedArchiveError(f"data after end of archive marker at offset {offset}")


def _extract_regular_files(content: bytes) -> bytes:
    """
    Concatenate the contents of all regular files in a tar archive.

    Entries are read sequentially in archive order. Directories, links and
    other entry types are skipped. Empty content is an empty archive.
    """
    if not content:
        return b""

    buffer = io.BytesIO()
    try:
        with tarfile.open(fileobj=io.BytesIO(content), mode="r|") as tar:
            for member in tar:
                if not member.isreg():
                    logger.debug(f"Skipping non-regular tar entry: {member.name}")
                    continue
                data = tar.extractfile(member).read()
                logger.debug(f"Extracted tar entry: {member.name}, size: {len(data)} bytes")
                buffer.write(data)
            end = tar.offset
    except tarfile.TarError as e:
        raise MalformedArchiveError(f"invalid header in tar: {e}") from e

    _check_end_of_archive(content, end)
    return buffer.getvalue()


def decode_tar(view: BinaryIO) -> bytes:
    """Extract regular-file contents from an uncompressed tar archive."""
    return _extract_regular_files(view.read())


def decode_gzip_tar(view: BinaryIO) -> bytes:
    """Extract regular-file contents from a gzip-compressed tar archive."""
    return _extract_regular_files(_inflate(view))


def decode_gzip(view: BinaryIO) -> bytes:
    """Inflate a gzip-compressed stream without any structural parsing."""
    return _inflate(view)


def decode_identity(view: BinaryIO) -> bytes:
    """Return the content unchanged. Never fails."""
    return view.read()


# Registered methods, listed from most to least specific
METHODS = {
    "gzip+tar": Method("gzip+tar", decode_gzip_tar),
    "tar": Method("tar", decode_tar),
    "gzip": Method("gzip", decode_gzip),
    "identity": Method("identity", decode_identity),
}

DEFAULT_ORDER = ("gzip+tar", "tar", "gzip", "identity")


def parse_method_names(value: str) -> tuple[str, ...]:
    """
    Split a comma separated method list into names.

    Whitespace around names is ignored, as are empty items.

    Example:
        >>> parse_method_names("gzip+tar, tar,identity")
        ('gzip+tar', 'tar', 'identity')
    """
    return tuple(name.strip() for name in value.split(",") if name.strip())


def resolve_methods(names) -> tuple[Method, ...]:
    """
    Look up registered methods by name, keeping the given order.

    Args:
        names: Iterable of method names (e.g., ("gzip+tar", "tar", "identity"))

    Returns:
        Tuple of Method in the same order

    Raises:
        UnknownMethodError: If a name is not registered or appears twice
    """
    resolved = []
    seen = set()
    for name in names:
        if name not in METHODS:
            raise UnknownMethodError(
                f"Unknown decode method '{name}'. Available: {', '.join(METHODS)}"
            )
        if name in seen:
            raise UnknownMethodError(f"Decode method '{name}' listed more than once")
        seen.add(name)
        resolved.append(METHODS[name])
    return tuple(resolved)
