"""Generate a static HTML site from a tree of Markdown files, and serve it."""

__version__ = "0.1.0"