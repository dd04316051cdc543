"""Repository creation, staging and user configuration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from minigit.util import RepositoryError, read_file, sha256_hex

REPO_DIR = ".mygit"
HEAD_REFERENCE = "ref: refs/heads/main"


def repo_path(root: str | Path = ".") -> Path:
    """Return the repository directory under a working-tree root."""
    return Path(root) / REPO_DIR


def init(root: str | Path = ".") -> bool:
    """Create a repository on the main branch; return False if one exists."""
    repo = repo_path(root)
    if repo.exists():
        return False

    heads = repo / "refs" / "heads"
    (repo / "objects").mkdir(parents=True)
    heads.mkdir(parents=True)
    (repo / "index").touch()
    (heads / "main").touch()
    (repo / "HEAD").write_text(HEAD_REFERENCE, encoding="utf-8")
    return True


def add(path: str, root: str | Path = ".") -> str:
    """Store a file as a blob and stage it; return the blob's hash."""
    repo = repo_path(root)
    if not repo.exists():
        raise RepositoryError(
            "Must initialize a mygit repository first using mygit init."
        )

    content = read_file(Path(root) / path)
    blob = b"blob " + str(len(content)).encode() + b"\0" + content
    digest = sha256_hex(blob)

    object_dir = repo / "objects" / digest[:2]
    object_file = object_dir / digest[2:]
    if not object_file.exists():
        object_dir.mkdir(exist_ok=True)
        object_file.write_bytes(blob)

    try:
        with open(repo / "index", "a", encoding="utf-8", newline="\n") as index:
            index.write(f"{digest} {path}\n")
    except OSError as exc:
        raise RepositoryError("Error opening index file.") from exc
    return digest


def config(
    root: str | Path = ".", input_func: Callable[[str], str] = input
) -> bool:
    """Ask for the user's name and e-mail and write them to the config file.

    Returns False without asking if a config file already exists.
    """
    repo = repo_path(root)
    config_file = repo / "config"
    if config_file.exists():
        return False
    if not repo.is_dir():
        raise RepositoryError(
            "Must initialize a mygit repository first using mygit init."
        )

    name = input_func("enter name: ")
    email = input_func("enter email: ")
    config_file.write_text(
        f"[user]\nname = {name}\nemail = {email}\n", encoding="utf-8"
    )
    return True