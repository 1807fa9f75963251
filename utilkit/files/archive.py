"""In-memory zip archive creation."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import BinaryIO


def _write_entries(target: BinaryIO, entries: dict[str, bytes], compression: int) -> None:
    with zipfile.ZipFile(target, mode="w", compression=compression) as archive:
        for name, data in entries.items():
            archive.writestr(name, data)


def create_archive(entries: dict[str, bytes], *, compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """Build a zip archive from a ``name -> content`` mapping and return its bytes."""
    buffer = io.BytesIO()
    _write_entries(buffer, entries, compression)
    return buffer.getvalue()


def write_archive(
    path: str | Path,
    entries: dict[str, bytes],
    *,
    compression: int = zipfile.ZIP_DEFLATED,
) -> None:
    """Write a zip archive of *entries* to *path*, replacing any existing file."""
    with Path(path).open("wb") as f:
        _write_entries(f, entries, compression)


def read_archive(source: bytes | str | Path) -> dict[str, bytes]:
    """Return the ``name -> content`` mapping of a zip given as bytes or a path."""
    target: BinaryIO | Path = io.BytesIO(source) if isinstance(source, bytes) else Path(source)
    with zipfile.ZipFile(target) as archive:
        return {info.filename: archive.read(info) for info in archive.infolist() if not info.is_dir()}
