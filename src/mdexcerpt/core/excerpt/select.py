"""Choose the top-level nodes that make up an excerpt"""

from typing import Optional

from mdexcerpt.core.models import NodeKind, Paragraph, Text, UNRENDERABLE_KINDS
from mdexcerpt.core.utils.text import to_string


ELLIPSIS = "…"
_SKIPPED = {k.value for k in UNRENDERABLE_KINDS}


def _fit_text(text: str, remaining: int) -> str:
    """Cut text to remaining chars, backing off to the last space past the halfway mark."""
    cut = text[:remaining]
    space = cut.rfind(' ')
    if space > remaining * 0.5:
        cut = cut[:space]
    return cut + ELLIPSIS


def truncate_paragraph(node: Paragraph, budget: int) -> Optional[Paragraph]:
    """Return a copy of node whose inline text fits budget chars, ending in an ellipsis.

    Text children are cut word-safely; any other inline child that overflows
    is replaced by a bare ellipsis. None if nothing remains.
    """
    clone = node.model_copy(deep=True)
    count = 0
    kept = []

    for child in clone.children:
        if child.type == NodeKind.text.value:
            if count + len(child.value) <= budget:
                kept.append(child)
                count += len(child.value)
                continue
            kept.append(Text(value=_fit_text(child.value, budget - count)))
            break

        length = len(to_string(child))
        if count + length <= budget:
            kept.append(child)
            count += length
            continue
        kept.append(Text(value=ELLIPSIS))
        break

    if not kept:
        return None
    clone.children = kept
    return clone


def select_excerpt_nodes(children: list, index: Optional[int], max_length: int) -> list:
    """Return the ordered nodes to render as the excerpt.

    With a cut index, everything before it except import/export and component
    nodes. Without one, whole nodes while their text fits max_length, then at
    most one truncated paragraph.
    """
    if index is not None:
        return [n for n in children[:index] if n.type not in _SKIPPED]

    selected = []
    count = 0
    for node in children:
        if node.type in _SKIPPED:
            continue
        length = len(to_string(node))
        if count + length <= max_length:
            selected.append(node)
            count += length
            continue
        if node.type == NodeKind.paragraph.value and count < max_length:
            truncated = truncate_paragraph(node, max_length - count)
            if truncated is not None:
                selected.append(truncated)
        break
    return selected
