"""Plain-text flattening of document tree nodes"""


def to_string(node) -> str:
    """Return the concatenated text content of node, without markup.

    Literal nodes contribute their value, images their alt text, parents the
    text of their children. Nodes with neither (break, thematicBreak) add ''.
    """
    value = getattr(node, 'value', None)
    if isinstance(value, str):
        return value
    alt = getattr(node, 'alt', None)
    if isinstance(alt, str):
        return alt
    return ''.join(to_string(c) for c in getattr(node, 'children', None) or [])
