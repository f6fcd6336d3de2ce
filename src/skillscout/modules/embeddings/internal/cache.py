"""On-disk embedding cache.

Each entry is the raw little-endian float32 buffer of one vector, no header.
Entries are content-addressed (see shared.hashing) and never invalidated.
"""

from __future__ import annotations

import asyncio
import errno
import os
import sys
import tempfile
from pathlib import Path

import numpy as np

# Explicit little-endian so files are portable across hosts.
CACHE_DTYPE = np.dtype("<f4")

_MISS_ERRNOS = {errno.ENOENT, errno.EACCES, errno.EPERM}


def _read_sync(path: Path) -> np.ndarray | None:
    try:
        data = path.read_bytes()
    except OSError as e:
        if e.errno in _MISS_ERRNOS or isinstance(e, IsADirectoryError):
            return None
        print(f"Failed to read cached embedding from {path}: {e}", file=sys.stderr)
        return None

    if not data or len(data) % CACHE_DTYPE.itemsize != 0:
        print(
            f"Ignoring cached embedding with invalid size ({len(data)} bytes): {path}",
            file=sys.stderr,
        )
        return None
    return np.frombuffer(data, dtype=CACHE_DTYPE).astype(np.float32)


def _write_sync(path: Path, vector: np.ndarray) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = np.ascontiguousarray(vector, dtype=CACHE_DTYPE).tobytes()
    # Write-then-rename keeps readers from seeing a partial file.
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


async def read_cached_embedding(path: Path) -> np.ndarray | None:
    """Return the cached vector, or None on a miss (missing/unreadable/corrupt)."""
    return await asyncio.to_thread(_read_sync, Path(path))


async def write_cached_embedding(path: Path, vector: np.ndarray) -> None:
    """Persist a vector, creating parent directories as needed."""
    await asyncio.to_thread(_write_sync, Path(path), vector)


__all__ = ["CACHE_DTYPE", "read_cached_embedding", "write_cached_embedding"]
