"""Unit tests for core/parse.py"""

import pytest

from mdexcerpt.core.models import MdxFlowExpression, ParsedDoc, Paragraph
from mdexcerpt.core.parse import _strip_frontmatter, discover_files, parse_file


def test_strip_frontmatter_with_yaml():
    """_strip_frontmatter extracts YAML header and returns body."""
    text = "---\ntitle: Hello\n---\n# Body\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    """_strip_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {}
    assert body == text


def test_strip_frontmatter_invalid_yaml():
    """_strip_frontmatter raises ValueError on malformed YAML."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter"):
        _strip_frontmatter("---\nkey: [unclosed\n---\nBody\n")


def test_strip_frontmatter_non_mapping():
    """_strip_frontmatter rejects a YAML header that is not a mapping."""
    with pytest.raises(ValueError, match="expected a mapping"):
        _strip_frontmatter("---\n- a\n- b\n---\nBody\n")


def test_discover_files_single(tmp_path):
    """discover_files returns a list with one file when given a file path."""
    f = tmp_path / "post.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_non_md_skipped(tmp_path):
    """discover_files ignores non-.md/.mdx files."""
    (tmp_path / "notes.txt").write_text("text")
    assert discover_files(tmp_path) == []


def test_discover_files_dir(tmp_path):
    """discover_files finds all .md and .mdx files recursively, skipping _partials."""
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "_draft-partial.md").write_text("x")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    files = discover_files(tmp_path)
    assert [f.name for f in files] == ["a.md", "b.mdx"]


def test_parse_file_no_frontmatter(tmp_path):
    """parse_file produces a ParsedDoc with empty frontmatter and a tree."""
    f = tmp_path / "plain.md"
    f.write_text("# Hello\n\nWorld.\n")
    doc = parse_file(f)
    assert isinstance(doc, ParsedDoc)
    assert doc.frontmatter == {}
    assert doc.slug == "plain"
    assert [n.type for n in doc.tree.children] == ["heading", "paragraph"]
    assert doc.data == {}


def test_parse_file_with_frontmatter(tmp_path):
    """parse_file extracts frontmatter and keeps it out of the tree."""
    f = tmp_path / "post.md"
    f.write_text("---\ntitle: My Post\n---\n# Body\n")
    doc = parse_file(f)
    assert doc.frontmatter == {"title": "My Post"}
    assert "---" not in doc.markdown
    assert doc.raw_markdown.startswith("---")


def test_slug_from_frontmatter(tmp_path):
    """parse_file uses frontmatter slug field when present."""
    f = tmp_path / "anything.md"
    f.write_text("---\nslug: custom-slug\n---\n# Body\n")
    assert parse_file(f).slug == "custom-slug"


def test_slug_from_filename(tmp_path):
    """parse_file derives slug from filename stem when no frontmatter slug."""
    f = tmp_path / "My Post.md"
    f.write_text("# Body\n")
    assert parse_file(f).slug == "my-post"


def test_mdx_dialect_by_suffix(tmp_path):
    """.mdx files get MDX block rules; .md files treat the same source as prose."""
    body = "{/* more */}\n"
    (tmp_path / "a.mdx").write_text(body)
    (tmp_path / "b.md").write_text(body)
    assert isinstance(parse_file(tmp_path / "a.mdx").tree.children[0], MdxFlowExpression)
    assert isinstance(parse_file(tmp_path / "b.md").tree.children[0], Paragraph)
