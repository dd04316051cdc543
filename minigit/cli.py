"""Command-line entry point."""

from __future__ import annotations

import sys

from minigit.commit import commit
from minigit.repo import add, config, init
from minigit.util import RepositoryError


def main(argv: list[str] | None = None) -> int:
    """Run one repository command and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Running mygit")

    if not args:
        print("Usage: ./mygit [argument]")
        return 1

    command = args[0]
    try:
        if command == "init":
            if init():
                print("created a mygit repository on the main branch")
            else:
                print("mygit repository already created")
        elif command == "add":
            if len(args) < 2:
                print("Usage: ./mygit add [file]")
                return 1
            add(args[1])
            print(f"added {args[1]} to the staging area.")
        elif command == "commit":
            if len(args) < 2:
                print("Usage: ./mygit commit -m [message]")
                return 1
            message = "".join(word + " " for word in args[2:])
            digest = commit(message)
            print(f"Creating a new commit object with hash: {digest}")
        elif command == "config":
            if not config():
                print("Config file already exists.")
    except RepositoryError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())