"""File hashing and archive helpers."""

from utilkit.files.archive import create_archive, read_archive, write_archive
from utilkit.files.filehash import (
    FileHash,
    HashFileFormatError,
    compute_md5,
    get_hash,
    get_hashes,
    load_hashes,
    refresh_hashes,
    save_hashes,
    verify_hashes,
)

__all__ = [
    "FileHash",
    "HashFileFormatError",
    "compute_md5",
    "create_archive",
    "get_hash",
    "get_hashes",
    "load_hashes",
    "read_archive",
    "refresh_hashes",
    "save_hashes",
    "verify_hashes",
    "write_archive",
]
