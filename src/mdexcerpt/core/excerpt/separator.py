"""Locate the explicit excerpt cut marker among a document's top-level nodes"""

import re
from typing import NamedTuple, Optional

from mdexcerpt.core.models import Html, NodeKind, Raw


# <!-- more --> in markdown; {/* more */} in MDX
HTML_MORE_RE = re.compile(r'<!--\s*more\s*-->', re.IGNORECASE)
MDX_MORE_RE = re.compile(r'^\s*/\*\s*more\s*\*/\s*$')

SEPARATOR_HTML = '<hr data-excerpt-separator="true" aria-hidden="true" style="display:none">'


class SeparatorMatch(NamedTuple):
    """Cut position (None if absent) and the children with the marker replaced."""
    index: Optional[int]
    children: list


def _placeholder(node):
    """Return the hidden separator node replacing node, or None if node is not a marker."""
    kind = node.type
    if kind == NodeKind.html.value and HTML_MORE_RE.search(node.value):
        return Html(value=SEPARATOR_HTML)
    if kind == NodeKind.raw.value and HTML_MORE_RE.search(node.value):
        return Raw(value=SEPARATOR_HTML)
    if kind == NodeKind.mdx_flow_expression.value and MDX_MORE_RE.match(node.value):
        return Html(value=SEPARATOR_HTML)
    return None


def locate_separator(children: list) -> SeparatorMatch:
    """Find the first cut marker in children.

    The input list is left untouched; on a match the returned children are a
    new list with the marker swapped for the hidden separator node.
    """
    for i, node in enumerate(children):
        placeholder = _placeholder(node)
        if placeholder is not None:
            return SeparatorMatch(i, [*children[:i], placeholder, *children[i + 1:]])
    return SeparatorMatch(None, children)
