"""Low-level helpers shared by the repository commands."""

from __future__ import annotations

import hashlib
import zlib
from dataclasses import dataclass
from pathlib import Path


class RepositoryError(Exception):
    """Raised when the repository is missing, incomplete or malformed."""


@dataclass
class IndexEntry:
    """One staged file: its blob hash (hex and binary) and its path."""

    hash_string: str
    path: str
    hash_binary: bytes = b""


def read_file(path: str | Path) -> bytes:
    """Return the whole content of a file as bytes."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise RepositoryError(f"Error opening file at {path}") from exc


def hex_char_to_num(ch: str) -> int:
    """Return the value of a single hexadecimal digit."""
    if len(ch) == 1:
        if "0" <= ch <= "9":
            return ord(ch) - ord("0")
        if "a" <= ch <= "f":
            return 10 + ord(ch) - ord("a")
        if "A" <= ch <= "F":
            return 10 + ord(ch) - ord("A")
    raise ValueError(f"Invalid character in string: {ch!r}")


def hash_string_to_binary(hex_string: str) -> bytes:
    """Convert a hexadecimal hash string into its raw bytes."""
    if len(hex_string) % 2:
        raise ValueError("Hash string must have an even number of digits")
    return bytes(
        hex_char_to_num(high) << 4 | hex_char_to_num(low)
        for high, low in zip(hex_string[::2], hex_string[1::2])
    )


def sha256_hex(data: bytes | str) -> str:
    """Return the lowercase hexadecimal SHA-256 digest of the data."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def compress(data: bytes) -> bytes:
    """Compress data with DEFLATE in a zlib stream at the default level."""
    return zlib.compress(data, zlib.Z_DEFAULT_COMPRESSION)


def write_binary(path: str | Path, data: bytes) -> None:
    """Write raw bytes to a file, replacing its content."""
    Path(path).write_bytes(data)


def _value_after_equals(line: str) -> str:
    return line[line.index("=") + 2 :]


def parse_config_for_user(repo: str | Path) -> tuple[str, str]:
    """Read the user's name and e-mail from the repository's config file."""
    try:
        text = (Path(repo) / "config").read_text(encoding="utf-8")
    except OSError as exc:
        raise RepositoryError("Config file failed to open") from exc

    name = ""
    email = ""
    for line in text.splitlines():
        if "name =" in line:
            name = _value_after_equals(line)
        elif "email =" in line:
            email = _value_after_equals(line)
            break
    return name, email


def parse_head_for_branch(text: str) -> str:
    """Return the branch reference path named by the content of HEAD."""
    for line in text.splitlines():
        if "ref:" in line:
            return line[line.index(":") + 2 :]
    raise RepositoryError("HEAD does not name a branch")


def collect_index_entries(repo: str | Path) -> list[IndexEntry]:
    """Read every entry of the repository's index file."""
    try:
        text = (Path(repo) / "index").read_text(encoding="utf-8")
    except OSError as exc:
        raise RepositoryError("Error opening index file") from exc

    entries = []
    for line in text.splitlines():
        fields = line.split()
        hash_string = fields[0] if fields else ""
        path = fields[1] if len(fields) > 1 else ""
        entries.append(IndexEntry(hash_string, path))
    return entries