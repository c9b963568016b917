"""Source tree discovery, validation and output generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from staticpp.document import Markdown, convert_to_html

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


class SiteStructureError(RuntimeError):
    """Raised when the site source is missing or malformed."""


@dataclass
class FileNode:
    """A file or directory in the source tree."""

    path: Path
    is_directory: bool
    markdown_content: Markdown | None = None
    children: list[FileNode] = field(default_factory=list)
    dist_root: str | None = None

    def replace_top_level_dir(self, new_root: str | Path) -> Path:
        """Return this node's path with its first component replaced."""
        return Path(new_root).joinpath(*Path(self.path).parts[1:])


class FileStructureTree:
    """The tree of files and directories below a base path."""

    def __init__(self, base_path: str | Path) -> None:
        base_path = Path(base_path)
        if not base_path.is_dir():
            raise SiteStructureError(
                "base_path does not exist or is not a directory"
            )
        self.root = FileNode(base_path, True)
        self._build(self.root)

    def _build(self, node: FileNode) -> None:
        for entry in sorted(node.path.iterdir()):
            if entry.is_dir():
                child = FileNode(entry, True)
                node.children.append(child)
                self._build(child)
            elif entry.is_file():
                content = None
                if entry.suffix == MARKDOWN_SUFFIX:
                    content = Markdown(entry, entry.read_text(encoding="utf-8"))
                node.children.append(FileNode(entry, False, content))

    def traverse_and_print(self, node: FileNode | None = None, depth: int = 0) -> None:
        """Print ``node`` and everything below it, indented by depth."""
        node = self.root if node is None else node
        kind = "[DIR] " if node.is_directory else "[FILE] "
        line = " " * depth + kind + node.path.name
        if node.markdown_content is not None:
            line += f"(MD content size: {len(node.markdown_content.content)})"
        print(line)
        for child in node.children:
            self.traverse_and_print(child, depth + 1)

    def traverse_convert_and_build_dist(
        self, node: FileNode | None, out_path: str | Path, depth: int = 0
    ) -> None:
        """Write the HTML for ``node`` and its descendants under ``out_path``."""
        node = self.root if node is None else node
        root_path = Path(out_path)
        root_path.mkdir(exist_ok=True)

        target = node.replace_top_level_dir(root_path)
        if node.is_directory:
            target.mkdir(exist_ok=True)
        elif node.markdown_content is not None:
            document = convert_to_html(node.markdown_content)
            if not target.is_dir():
                target.parent.mkdir(parents=True, exist_ok=True)
                target = target.with_suffix(HTML_SUFFIX)
                try:
                    target.write_text(document.content + "\n", encoding="utf-8")
                except OSError as exc:
                    raise SiteStructureError(
                        f"failed to open '{target.as_posix()}' for writing"
                    ) from exc

        for child in node.children:
            self.traverse_convert_and_build_dist(child, root_path, depth + 1)


class FileManager:
    """Checks a site source directory and reads it into a tree."""

    def __init__(self, expected_root_paths: list[str]) -> None:
        self.root_paths = list(expected_root_paths)
        self.src_path: Path | None = None

    def is_base_path_set(self) -> bool:
        return self.src_path is not None

    def set_base_path(self, path: str | Path) -> None:
        path = Path(path)
        if not path.is_dir():
            raise SiteStructureError(
                "provided path does not exist or is not a directory"
            )
        self.src_path = path

    def validate_file_structure(self) -> None:
        """Check that every expected top-level directory exists."""
        if self.src_path is None:
            raise SiteStructureError("base path not set, call set base path first")
        for name in self.root_paths:
            if not (self.src_path / name).is_dir():
                raise SiteStructureError(
                    f"invalid file structure: '{name}' directory missing."
                )
        print(f"file structure validated for {self.src_path}")

    def read_files(self) -> FileStructureTree:
        if self.src_path is None:
            raise SiteStructureError("base path not set, please set_base_path first")
        return FileStructureTree(self.src_path)