"""Atomic file writing."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from typing import BinaryIO, Union

StrPath = Union[str, "os.PathLike[str]"]
Payload = Union[str, bytes, bytearray, memoryview, BinaryIO]


def atomic_write_file(path: StrPath, data: Payload) -> None:
    """Write ``data`` to ``path`` atomically with permissions 0600.

    ``data`` may be text (written as UTF-8), bytes, or a binary file object.
    The content goes to a temporary file first, which is then renamed over
    the target.
    """
    target = os.fspath(path)
    directory = os.path.dirname(os.path.abspath(target))
    fd, tmp_name = tempfile.mkstemp(prefix="ajisai-atomic-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            if isinstance(data, str):
                handle.write(data.encode("utf-8"))
            elif isinstance(data, (bytes, bytearray, memoryview)):
                handle.write(data)
            else:
                shutil.copyfileobj(data, handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, 0o600)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise