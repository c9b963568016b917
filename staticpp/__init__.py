"""Build a static HTML site from a blog-shaped tree of Markdown files."""

__version__ = "0.1.0"