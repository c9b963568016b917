from pathlib import Path

import pytest

from staticpp.document import (
    HtmlDocument,
    Markdown,
    TemplateError,
    convert_to_html,
    extract_and_remove_metadata,
    transform_document_with_template,
)


def make(text):
    return Markdown(Path("post.md"), text)


def test_extract_front_matter_and_strip_it():
    md = make("---\ntitle: Hello\n---\n\n# Body")
    assert extract_and_remove_metadata(md) == {"title": "Hello"}
    assert md.content == "# Body"


def test_extract_multiple_keys():
    md = make("---\r\ntitle: Hello\r\nauthor: Ann\r\n---\r\nText")
    meta = extract_and_remove_metadata(md)
    assert meta == {"title": "Hello", "author": "Ann"}
    assert md.content == "Text"


def test_no_front_matter_leaves_content():
    md = make("# Just a heading")
    assert extract_and_remove_metadata(md) is None
    assert md.content == "# Just a heading"


def test_fence_not_at_start_is_ignored():
    text = "intro\n---\ntitle: x\n---\n"
    md = make(text)
    assert extract_and_remove_metadata(md) is None
    assert md.content == text


def test_unclosed_fence_is_ignored():
    text = "---\ntitle: x\nbody"
    md = make(text)
    assert extract_and_remove_metadata(md) is None
    assert md.content == text


def test_malformed_yaml_returns_none_but_strips_block(capsys):
    md = make("---\nkey: [unclosed\n---\nbody")
    assert extract_and_remove_metadata(md) is None
    assert md.content == "body"
    assert "YAML parse error" in capsys.readouterr().err


def test_convert_to_html_with_title(capsys):
    md = make("---\ntitle: Hello\n---\n# welcome")
    doc = convert_to_html(md)
    assert doc.metadata == {"title": "Hello"}
    assert "<h1>welcome</h1>" in doc.content
    assert "title" not in doc.content
    assert "title: Hello" in capsys.readouterr().out


def test_convert_to_html_without_metadata():
    doc = convert_to_html(make("some content."))
    assert doc.metadata is None
    assert "some content." in doc.content


def test_template_missing_returns_content(tmp_path):
    doc = HtmlDocument(metadata=None, content="<p>x</p>")
    assert transform_document_with_template(tmp_path / "none.rhtml", doc) == "<p>x</p>"


def test_rhtml_template_returns_content(tmp_path):
    template = tmp_path / "page.rhtml"
    template.write_text("<html></html>")
    doc = HtmlDocument(metadata={"title": "t"}, content="<p>y</p>")
    assert transform_document_with_template(template, doc) == "<p>y</p>"


def test_other_template_type_raises(tmp_path):
    template = tmp_path / "page.txt"
    template.write_text("irrelevant")
    doc = HtmlDocument(metadata=None, content="")
    with pytest.raises(TemplateError):
        transform_document_with_template(template, doc)