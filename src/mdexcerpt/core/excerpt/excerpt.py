"""Excerpt extraction: locate the cut, select nodes, render and store on the document"""

import logging
from typing import Callable, NamedTuple

from markdown_it.common.utils import escapeHtml

from mdexcerpt.core.excerpt.select import select_excerpt_nodes
from mdexcerpt.core.excerpt.separator import locate_separator
from mdexcerpt.core.models import ExcerptResult, ParsedDoc, Root
from mdexcerpt.core.render import to_html
from mdexcerpt.core.utils.text import to_string


logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 300


class RenderOutcome(NamedTuple):
    """Rendered HTML, and whether it is the plain-text fallback."""
    html: str
    fallback: bool


class Excerpt(NamedTuple):
    """The tree with the cut marker replaced, and the excerpt fields for it."""
    tree: Root
    result: ExcerptResult


def render_safely(nodes: list, render: Callable[[Root], str] = to_html) -> RenderOutcome:
    """Render nodes under a synthetic root; on failure fall back to a plain-text paragraph."""
    if not nodes:
        return RenderOutcome("", False)
    root = Root(children=nodes)
    try:
        return RenderOutcome(render(root), False)
    except Exception as e:
        logger.warning("Excerpt rendering failed, using plain text: %s", e)
        return RenderOutcome(f"<p>{escapeHtml(to_string(root))}</p>", True)


def extract_excerpt(
    tree: Root,
    max_length: int = DEFAULT_MAX_LENGTH,
    render: Callable[[Root], str] = to_html,
    ) -> Excerpt:
    """Compute the excerpt of tree without mutating it."""
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")
    match = locate_separator(tree.children)
    nodes = select_excerpt_nodes(match.children, match.index, max_length)
    outcome = render_safely(nodes, render)
    logger.debug(
        "excerpt: %d of %d nodes, separator=%s, fallback=%s",
        len(nodes), len(tree.children), match.index, outcome.fallback,
    )
    new_tree = tree if match.index is None else tree.model_copy(update={"children": match.children})
    return Excerpt(
        tree=new_tree,
        result=ExcerptResult(excerpt_html=outcome.html, has_more_separator=match.index is not None),
    )


def apply_excerpt(doc: ParsedDoc, max_length: int = DEFAULT_MAX_LENGTH) -> ExcerptResult:
    """Store the excerpt fields in doc.data and swap in the tree with the hidden separator."""
    excerpt = extract_excerpt(doc.tree, max_length)
    doc.tree = excerpt.tree
    doc.data.update(excerpt.result.model_dump(by_alias=True))
    return excerpt.result
