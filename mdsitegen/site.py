"""Building a site directory: static files and rendered pages."""

from __future__ import annotations

import os
from typing import Union

from mdsitegen.blocks import extract_title, markdown_to_html_node

PathLike = Union[str, "os.PathLike[str]"]

_DIR_MODE = 0o750
_FILE_MODE = 0o600


def _ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, _DIR_MODE)


def _entries(directory: str) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _read_text(path: PathLike) -> str:
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8")


def _write_bytes(path: str, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def copy_static_files_recursive(src: PathLike, dest: PathLike) -> None:
    """Copy every file under `src` into `dest`, creating directories as needed."""
    src, dest = os.fspath(src), os.fspath(dest)
    _ensure_dir(dest)
    for entry in _entries(src):
        source = f"{src}/{entry.name}"
        target = f"{dest}/{entry.name}"
        print("*", source, "->", target)
        if entry.is_dir(follow_symlinks=False):
            copy_static_files_recursive(source, target)
        else:
            with open(source, "rb") as handle:
                _write_bytes(target, handle.read())


def generate_page(
    src: PathLike, dest: PathLike, template_path: PathLike, base_path: str
) -> None:
    """Render one markdown file into `dest` using the HTML template."""
    print("Generating Page from", src, "to", dest, "with", template_path)
    markdown = _read_text(src)
    try:
        root = markdown_to_html_node(markdown)
    except ValueError as err:
        raise ValueError(f"failed to convert markdown to html: {err}") from err
    try:
        content = root.to_html()
    except ValueError as err:
        raise ValueError(f"failed to convert html node to html: {err}") from err
    try:
        title = extract_title(markdown)
    except ValueError as err:
        raise ValueError(f"failed to extract title: {err}") from err
    template = _read_text(template_path)
    page = template.replace("{{ Title }}", title, 1)
    page = page.replace("{{ Content }}", content, 1)
    page = page.replace('href="/', 'href="' + base_path)
    page = page.replace('src="/', 'src="' + base_path)
    _write_bytes(os.fspath(dest), page.encode("utf-8"))


def generate_pages_recursive(
    content_dir: PathLike, template_path: PathLike, dest_dir: PathLike, base_path: str
) -> None:
    """Render every markdown file under `content_dir` into `dest_dir`."""
    content_dir, dest_dir = os.fspath(content_dir), os.fspath(dest_dir)
    _ensure_dir(dest_dir)
    for entry in _entries(content_dir):
        source = f"{content_dir}/{entry.name}"
        target = f"{dest_dir}/{entry.name.replace('.md', '.html', 1)}"
        print("*", source, "->", target)
        if entry.is_dir(follow_symlinks=False):
            generate_pages_recursive(source, template_path, target, base_path)
        else:
            try:
                generate_page(source, target, template_path, base_path)
            except ValueError as err:
                raise ValueError(f"failed to generate page: {err}") from err