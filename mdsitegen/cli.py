"""Interactive command that builds the site from markdown content."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Optional, Sequence

from mdsitegen.site import copy_static_files_recursive, generate_pages_recursive

MARKDOWN_DIR = "./files/content"
OUTPUT_DIR = "./files/output"
TEMPLATE_PATH = "./template.html"
STATIC_DIR = "./files/static"


def _read_token() -> str:
    """Read one line and return its single word, or an empty string."""
    words = sys.stdin.readline().split()
    return words[0] if len(words) == 1 else ""


def _prompt(label: str, default: str) -> str:
    print(f"{label}: (Default: {default})\n> ", end="", flush=True)
    return _read_token() or default


def _remove_all(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for the content and output paths, then build the site."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Markdown to HTML")
    base_path = f"/{args[0]}/" if len(args) == 1 else "/"

    md_path = _prompt("Enter Markdown directory path", MARKDOWN_DIR)
    print("path: ", md_path)
    out_path = _prompt("Enter output directory path", OUTPUT_DIR)
    print("path: ", out_path)

    print("Deleting old output directory")
    try:
        _remove_all(out_path)
    except OSError as err:
        print("Error:", err)
        return 1

    print("Copying static files")
    try:
        copy_static_files_recursive(STATIC_DIR, out_path)
    except OSError as err:
        print("Error:", err)
        return 1

    print("Generating pages")
    try:
        generate_pages_recursive(md_path, TEMPLATE_PATH, out_path, base_path)
    except (OSError, ValueError) as err:
        print("Error:", err)
        return 1

    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())