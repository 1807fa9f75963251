"""MD5 digests of files and ``md5sum``-style hash lists."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from pydantic import BaseModel

from utilkit.config import settings

logger = logging.getLogger(__name__)

_SEPARATOR = "  "


class HashFileFormatError(ValueError):
    """A hash list line could not be parsed."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed hash in line {line_number}: {line!r}")


class FileHash(BaseModel):
    """A file path together with its MD5 digest (uppercase hex)."""

    path: Path
    md5: str

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return self.path.name


def _hex_digest(digest: hashlib._Hash) -> str:
    return digest.hexdigest().upper()


def compute_md5(data: bytes) -> str:
    """Return the MD5 digest of *data* as uppercase hex."""
    return _hex_digest(hashlib.md5(data))


def get_hash(path: str | Path) -> FileHash:
    """Hash a single file, reading it in ``settings.hash_chunk_size`` blocks."""
    path = Path(path)
    digest = hashlib.md5()
    with path.open("rb") as f:
        while chunk := f.read(settings.hash_chunk_size):
            digest.update(chunk)
    return FileHash(path=path.resolve(), md5=_hex_digest(digest))


def get_hashes(directory: str | Path, pattern: str = "*") -> list[FileHash]:
    """Hash every regular file in *directory* matching *pattern*, sorted by name."""
    files = sorted(p for p in Path(directory).glob(pattern) if p.is_file())
    logger.debug("Hashing %d files in %s", len(files), directory)
    return [get_hash(p) for p in files]


def refresh_hashes(hashes: list[FileHash]) -> list[FileHash]:
    """Recompute digests for *hashes*, dropping files that no longer exist."""
    refreshed: list[FileHash] = []
    for entry in hashes:
        try:
            refreshed.append(get_hash(entry.path))
        except FileNotFoundError:
            logger.warning("File vanished, skipping: %s", entry.path)
    return refreshed


def save_hashes(hashes: list[FileHash], hash_file: str | Path) -> None:
    """Write ``<md5>  <path>`` lines to *hash_file*.

    Paths are written relative to the directory holding *hash_file*, which is
    where :func:`load_hashes` resolves them.
    """
    base = Path(hash_file).resolve().parent
    lines = []
    for entry in hashes:
        rel = Path(os.path.relpath(entry.path.resolve(), base)).as_posix()
        lines.append(f"{entry.md5}{_SEPARATOR}{rel}\n")
    Path(hash_file).write_text("".join(lines), encoding="utf-8")


def load_hashes(hash_file: str | Path) -> list[FileHash]:
    """Read a hash list written by :func:`save_hashes`.

    File names are resolved relative to the directory holding *hash_file*.
    Blank lines are skipped.

    Raises:
        HashFileFormatError: If a line has no separator or no file name.
    """
    hash_file = Path(hash_file)
    base = hash_file.resolve().parent
    hashes: list[FileHash] = []

    with hash_file.open(encoding="utf-8") as f:
        for line_number, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            split = line.find(_SEPARATOR)
            if split <= 0 or split == len(line) - len(_SEPARATOR):
                raise HashFileFormatError(line_number, line)

            md5, name = line[:split], line[split + len(_SEPARATOR) :]
            hashes.append(FileHash(path=base / name, md5=md5))

    return hashes


def verify_hashes(hash_file: str | Path) -> list[FileHash]:
    """Return the entries of *hash_file* whose file changed or is missing."""
    mismatched: list[FileHash] = []
    for entry in load_hashes(hash_file):
        if not entry.path.is_file():
            logger.warning("Missing file: %s", entry.path)
            mismatched.append(entry)
            continue
        current = get_hash(entry.path)
        if current.md5.upper() != entry.md5.upper():
            logger.info("Digest changed: %s", entry.path)
            mismatched.append(entry)
    return mismatched
