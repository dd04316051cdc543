import zlib

import pytest

from minigit.commit import build_commit_object, build_commit_tree, commit
from minigit.repo import add, init
from minigit.util import IndexEntry, RepositoryError, hash_string_to_binary, sha256_hex


def _object(root, digest):
    return root / ".mygit" / "objects" / digest[:2] / digest[2:]


@pytest.fixture
def repo(tmp_path):
    init(tmp_path)
    (tmp_path / ".mygit" / "config").write_text(
        "[user]\nname = Ada\nemail = ada@example.com\n", encoding="utf-8"
    )
    return tmp_path


def test_build_commit_tree_writes_compressed_tree(repo):
    digest = sha256_hex(b"blob 0\0")
    entry = IndexEntry(digest, "a.txt", hash_string_to_binary(digest))
    tree_hash = build_commit_tree([entry], repo)

    content = zlib.decompress(_object(repo, tree_hash).read_bytes())
    body = b"100644 a.txt\0" + hash_string_to_binary(digest)
    assert content == b"tree " + str(len(body)).encode() + b"\0" + body
    assert sha256_hex(content) == tree_hash


def test_empty_tree(repo):
    tree_hash = build_commit_tree([], repo)
    assert zlib.decompress(_object(repo, tree_hash).read_bytes()) == b"tree 0\0"


def test_first_commit_has_no_parent(repo):
    commit_hash = build_commit_object("ab" * 32, "first", repo)
    content = zlib.decompress(_object(repo, commit_hash).read_bytes())
    data = (
        f"tree {'ab' * 32}\nauthor Ada <ada@example.com>\n"
        "committer Ada <ada@example.com>\nfirst"
    ).encode()
    assert content == b"commit " + str(len(data)).encode() + b"\0" + data
    assert sha256_hex(content) == commit_hash
    assert (repo / ".mygit" / "refs" / "heads" / "main").read_text() == commit_hash


def test_second_commit_names_parent(repo):
    (repo / "a.txt").write_text("one")
    add("a.txt", repo)
    first = commit("one", repo)
    second = commit("two", repo)

    content = zlib.decompress(_object(repo, second).read_bytes())
    assert f"\nparent {first}\n".encode() in content
    assert content.endswith(b"two")
    assert (repo / ".mygit" / "refs" / "heads" / "main").read_text() == second


def test_commit_includes_staged_files(repo):
    (repo / "a.txt").write_text("alpha")
    blob_hash = add("a.txt", repo)
    commit_hash = commit("msg", repo)

    content = zlib.decompress(_object(repo, commit_hash).read_bytes())
    tree_line = content.split(b"\0", 1)[1].split(b"\n")[0]
    tree_hash = tree_line.split(b" ")[1].decode()
    tree = zlib.decompress(_object(repo, tree_hash).read_bytes())
    assert tree.endswith(b"100644 a.txt\0" + hash_string_to_binary(blob_hash))


def test_commit_without_config_raises(tmp_path):
    init(tmp_path)
    with pytest.raises(RepositoryError):
        commit("msg", tmp_path)


def test_commit_without_repository_raises(tmp_path):
    with pytest.raises(RepositoryError):
        commit("msg", tmp_path)