import gzip
import io
import tarfile

import pytest

from unpacker.methods import resolve_methods


def build_tar(files, directories=(), symlinks=()) -> bytes:
    """Create an uncompressed tar archive in memory.

    ``files`` is a list of (name, content) pairs written in order. Directories
    and symlinks are added before the files.
    """
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        for name in directories:
            info = tarfile.TarInfo(name)
            info.type = tarfile.DIRTYPE
            info.mode = 0o755
            tar.addfile(info)
        for name, target in symlinks:
            info = tarfile.TarInfo(name)
            info.type = tarfile.SYMTYPE
            info.linkname = target
            tar.addfile(info)
        for name, content in files:
            info = tarfile.TarInfo(name)
            info.size = len(content)
            tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


def build_gzip(content: bytes) -> bytes:
    return gzip.compress(content)


@pytest.fixture
def hello_world_files():
    return [("a.txt", b"hello"), ("b.txt", b"world")]


@pytest.fixture
def hello_world_tar(hello_world_files):
    return build_tar(hello_world_files)


@pytest.fixture
def hello_world_tgz(hello_world_tar):
    return build_gzip(hello_world_tar)


@pytest.fixture
def chain():
    """Factory building a method tuple from names."""
    def _chain(*names):
        return resolve_methods(names)
    return _chain
