"""Markdown documents, front-matter extraction and HTML conversion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import markdown as _markdown
import yaml

_FENCE = "---"
_NEWLINES = "\r\n"
TEMPLATE_SUFFIX = ".rhtml"


class TemplateError(RuntimeError):
    """Raised when a template cannot be applied to a document."""


@dataclass
class Markdown:
    """A markdown source file and its text."""

    file_path: Path
    content: str


@dataclass
class HtmlDocument:
    """Rendered HTML together with the front matter it came with."""

    metadata: Any | None
    content: str


def extract_and_remove_metadata(md: Markdown) -> Any | None:
    """Strip a leading ``---`` YAML block from ``md`` and return it parsed.

    Returns ``None`` when the content does not start with a complete block
    or when the block is not valid YAML. A complete block is removed from
    the content even if it fails to parse.
    """
    if not md.content.startswith(_FENCE):
        return None
    start = len(_FENCE)
    end = md.content.find(_FENCE, start)
    if end == -1:
        return None

    yaml_text = md.content[start:end]
    if yaml_text.strip(_NEWLINES):
        yaml_text = yaml_text.strip(_NEWLINES)

    md.content = md.content[end + len(_FENCE):].lstrip(_NEWLINES)

    try:
        return yaml.safe_load(yaml_text)
    except yaml.YAMLError as exc:
        print(f"YAML parse error: {exc}", file=sys.stderr)
        return None


def convert_to_html(md: Markdown) -> HtmlDocument:
    """Render ``md`` to HTML, removing and keeping its front matter."""
    metadata = extract_and_remove_metadata(md)
    if isinstance(metadata, dict) and "title" in metadata:
        print(f"title: {metadata['title']}")
    return HtmlDocument(metadata=metadata, content=_markdown.markdown(md.content))


def transform_document_with_template(
    template_path: str | Path, document: HtmlDocument
) -> str:
    """Apply a template to ``document``.

    A missing template leaves the content as it is, as does an ``.rhtml``
    template; any other kind of template is rejected.
    """
    template_path = Path(template_path)
    if not template_path.exists():
        return document.content
    if template_path.suffix == TEMPLATE_SUFFIX:
        return document.content
    raise TemplateError(f"unsupported template '{template_path}'")