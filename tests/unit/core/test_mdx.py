"""Unit tests for core/mdx.py block rules"""

import pytest

from mdexcerpt.core.models import MdxFlowExpression, MdxJsxFlowElement, MdxjsEsm, Paragraph


def test_esm_import(mdx):
    """An import statement becomes a single mdxjsEsm node."""
    tree = mdx("import Chart from './Chart'\nimport { x } from 'y'\n\nText.\n")
    assert isinstance(tree.children[0], MdxjsEsm)
    assert "import { x } from 'y'" in tree.children[0].value
    assert isinstance(tree.children[1], Paragraph)


def test_esm_export(mdx):
    """An export statement becomes an mdxjsEsm node."""
    tree = mdx("export const meta = { a: 1 }\n")
    assert isinstance(tree.children[0], MdxjsEsm)


@pytest.mark.parametrize("source,value", [
    ("{/* more */}", "/* more */"),
    ("{ /*more*/ }", " /*more*/ "),
    ("{1 + 1}", "1 + 1"),
])
def test_flow_expression_value_excludes_braces(mdx, source, value):
    """A standalone {...} line becomes an mdxFlowExpression without outer braces."""
    node = mdx(source + "\n").children[0]
    assert isinstance(node, MdxFlowExpression)
    assert node.value == value


def test_flow_expression_multiline(mdx):
    """Flow expressions may span lines until their braces balance."""
    node = mdx("{items.map(i => {\n  return i\n})}\n\nAfter.\n").children[0]
    assert isinstance(node, MdxFlowExpression)
    assert "return i" in node.value


def test_expression_with_trailing_text_is_prose(mdx):
    """A brace expression followed by text on the same line stays a paragraph."""
    assert isinstance(mdx("{x} and more words\n").children[0], Paragraph)


@pytest.mark.parametrize("source,name", [
    ("<Chart data={[1, 2]} />", "Chart"),
    ("<Charts.Bar />", "Charts.Bar"),
    ("<>\n  <Chart />\n</>", None),
])
def test_jsx_flow_element(mdx, source, name):
    """Capitalized tags and fragments become mdxJsxFlowElement nodes."""
    node = mdx(source + "\n").children[0]
    assert isinstance(node, MdxJsxFlowElement)
    assert node.name == name


def test_lowercase_tag_stays_html(mdx):
    """Lowercase tags are left to the html_block rule."""
    assert mdx("<div>raw</div>\n").children[0].type == "html"


def test_rules_not_registered_for_markdown(md):
    """Plain markdown parsing does not recognise MDX constructs."""
    tree = md("import x from 'y'\n")
    assert isinstance(tree.children[0], Paragraph)


def test_indented_is_code(mdx):
    """MDX constructs indented four spaces are code blocks."""
    assert mdx("    import x from 'y'\n").children[0].type == "code"
