"""Builds a site from a source directory."""

from __future__ import annotations

import sys
from pathlib import Path

from staticpp.filemanager import FileManager

EXPECTED_PATHS = ("posts", "pages", "assets")


class Generator:
    """Validates a site source and writes its HTML output.

    The build runs on construction. Errors are reported on stderr rather
    than raised. Output is written only when ``out_path`` is given.
    """

    def __init__(self, src_path: str | Path, out_path: str | Path | None = None) -> None:
        self.expected_paths = list(EXPECTED_PATHS)
        self.fm = FileManager(self.expected_paths)
        try:
            self.fm.set_base_path(src_path)
            self.fm.validate_file_structure()

            print("\nreading files and building tree...")
            tree = self.fm.read_files()

            print("\ntraversing, converting, and building dist...")
            if out_path is not None:
                tree.traverse_convert_and_build_dist(tree.root, out_path)
        except (RuntimeError, OSError) as exc:
            print(f"err: {exc}", file=sys.stderr)