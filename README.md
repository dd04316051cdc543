# minigit

A small version control tool that keeps its data in a `.mygit` directory
under the working tree. Files are stored as objects named by the SHA-256
hash of their content.

## Installation

```
pip install .
```

## Commands

Every command prints `Running mygit` first and works in the current
directory. A command that fails prints the reason and exits with status 1.

### init

```
minigit init
```

Creates `.mygit/` with an `objects/` directory, an empty `refs/heads/main`,
an empty `index` and a `HEAD` file holding `ref: refs/heads/main`. If
`.mygit/` already exists, nothing is changed and
`mygit repository already created` is printed.

### config

```
minigit config
```

Prompts for a name and an e-mail address (for example `Jane Doe` and
`jane@example.com`) and writes them to `.mygit/config`:

```
[user]
name = Jane Doe
email = jane@example.com
```

If the config file already exists, it is left alone and
`Config file already exists.` is printed. Committing needs this file.

### add

```
minigit add notes.txt
```

Stores the file as a blob object (`blob <size>\0<content>`, uncompressed)
at `.mygit/objects/<first two hex digits>/<remaining digits>` unless it is
already there, and appends a line `<hash> <path>` to the index. Adding the
same file twice appends two index lines.

### commit

```
minigit commit -m Describe the change
```

The word after `commit` (normally `-m`) is required but not otherwise
looked at; the remaining words form the message, each followed by a space.

A tree object is built from every index entry (mode `100644`, path, and the
binary blob hash), then a commit object naming the tree, the previous commit
on `main` as parent if there is one, and the configured author and
committer. Both objects are compressed with zlib and stored under
`.mygit/objects/`, and the branch named by `HEAD` is set to the new commit's
hash, which is printed.

## Using it from Python

```python
from pathlib import Path

from minigit.repo import init, add, config
from minigit.commit import commit

root = Path("project")
init(root)                                   # False if a repository exists
config(root, input_func=lambda prompt: "Jane Doe" if "name" in prompt else "jane@example.com")
blob_hash = add("notes.txt", root)           # path relative to root
commit_hash = commit("first commit", root)
```

`minigit.commit` also offers `build_commit_tree(entries, root)` and
`build_commit_object(tree_hash, message, root)` for the two steps of a
commit.

`minigit.util` holds the helpers: `IndexEntry`, `read_file`,
`hex_char_to_num`, `hash_string_to_binary`, `sha256_hex`, `compress`,
`write_binary`, `parse_config_for_user`, `parse_head_for_branch` and
`collect_index_entries`. Missing or malformed repository files raise
`RepositoryError`; an invalid hex digit raises `ValueError`.

## What it does not do

The tool only records history. There are no commands to show the log,
status or differences, to read objects back, to check out or restore
files, or to create or switch branches: commits always follow `main`. The
index is never cleared after a commit, so each commit includes everything
ever staged.

## Running the tests

```
pip install .[test]
pytest
```