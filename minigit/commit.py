"""Building tree and commit objects from the staged index."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from minigit.repo import repo_path
from minigit.util import (
    IndexEntry,
    RepositoryError,
    collect_index_entries,
    compress,
    hash_string_to_binary,
    parse_config_for_user,
    parse_head_for_branch,
    sha256_hex,
    write_binary,
)

NORMAL_FILE_MODE = "100644"


def _store_object(repo: Path, digest: str, content: bytes) -> None:
    object_dir = repo / "objects" / digest[:2]
    object_dir.mkdir(exist_ok=True)
    object_file = object_dir / digest[2:]
    if not object_file.exists():
        write_binary(object_file, compress(content))


def build_commit_tree(entries: Iterable[IndexEntry], root: str | Path = ".") -> str:
    """Write a tree object for the given entries and return its hash."""
    tree = b"".join(
        f"{NORMAL_FILE_MODE} {entry.path}".encode("utf-8") + b"\0" + entry.hash_binary
        for entry in entries
    )
    content = b"tree " + str(len(tree)).encode() + b"\0" + tree
    digest = sha256_hex(content)
    _store_object(repo_path(root), digest, content)
    return digest


def build_commit_object(tree_hash: str, message: str, root: str | Path = ".") -> str:
    """Write a commit object for a tree, advance the branch and return its hash."""
    repo = repo_path(root)
    name, email = parse_config_for_user(repo)

    main_branch = repo / "refs" / "heads" / "main"
    try:
        previous = main_branch.read_text(encoding="utf-8")
    except OSError as exc:
        raise RepositoryError("Unable to open main branch file") from exc

    lines = [f"tree {tree_hash}"]
    if previous:
        lines.append(f"parent {previous.splitlines()[0] if previous.splitlines() else ''}")
    lines.append(f"author {name} <{email}>")
    lines.append(f"committer {name} <{email}>")
    data = ("\n".join(lines) + "\n" + message).encode("utf-8")

    commit_object = b"commit " + str(len(data)).encode() + b"\0" + data
    digest = sha256_hex(commit_object)
    _store_object(repo, digest, commit_object)

    try:
        head = (repo / "HEAD").read_text(encoding="utf-8")
    except OSError as exc:
        raise RepositoryError("Unable to open HEAD") from exc
    branch = parse_head_for_branch(head)
    try:
        (repo / branch).write_text(digest, encoding="utf-8")
    except OSError as exc:
        raise RepositoryError("Failed to open branch heads file") from exc
    return digest


def commit(message: str, root: str | Path = ".") -> str:
    """Commit everything in the index with a message; return the commit hash."""
    entries = collect_index_entries(repo_path(root))
    for entry in entries:
        entry.hash_binary = hash_string_to_binary(entry.hash_string)
    tree_hash = build_commit_tree(entries, root)
    return build_commit_object(tree_hash, message, root)