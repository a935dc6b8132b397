"""Document tree to HTML rendering"""

from typing import Callable

from markdown_it.common.utils import escapeHtml

from mdexcerpt.core.models import NodeKind


class RenderError(ValueError):
    """Raised for nodes that have no static HTML rendering."""


def _attrs(**attrs) -> str:
    return ''.join(f' {k}="{escapeHtml(str(v))}"' for k, v in attrs.items() if v is not None)


def _inline(node) -> str:
    return ''.join(render_node(c) for c in node.children)


def _blocks(node) -> str:
    return '\n'.join(render_node(c) for c in node.children)


def _wrap_blocks(tag: str, node) -> str:
    inner = _blocks(node)
    return f"<{tag}>\n{inner}\n</{tag}>" if inner else f"<{tag}></{tag}>"


def _list_item(item, tight: bool) -> str:
    if not tight:
        return _wrap_blocks('li', item)
    parts = [_inline(c) if c.type == NodeKind.paragraph.value else render_node(c) for c in item.children]
    return "<li>" + "\n".join(parts) + "</li>"


def _list(node) -> str:
    tag = 'ol' if node.ordered else 'ul'
    start = node.start if node.ordered and node.start not in (None, 1) else None
    items = '\n'.join(_list_item(i, node.tight) for i in node.children)
    return f"<{tag}{_attrs(start=start)}>\n{items}\n</{tag}>"


def _table(node) -> str:
    def row(r, cell_tag):
        cells = '\n'.join(
            f"<{cell_tag}{_attrs(align=node.align[i] if i < len(node.align) else None)}>"
            f"{_inline(c)}</{cell_tag}>"
            for i, c in enumerate(r.children)
        )
        return f"<tr>\n{cells}\n</tr>"

    if not node.children:
        return "<table></table>"
    head, *body = node.children
    out = f"<table>\n<thead>\n{row(head, 'th')}\n</thead>"
    if body:
        out += "\n<tbody>\n" + '\n'.join(row(r, 'td') for r in body) + "\n</tbody>"
    return out + "\n</table>"


def _code(node) -> str:
    cls = f"language-{node.lang}" if node.lang else None
    return f"<pre><code{_attrs(**{'class': cls})}>{escapeHtml(node.value)}\n</code></pre>"


def _unrenderable(node) -> str:
    raise RenderError(f"'{node.type}' node has no static HTML rendering")


def _unknown(node) -> str:
    if node.children:
        return f"<div>{_blocks(node)}</div>"
    return escapeHtml(node.value or '')


HANDLERS: dict[str, Callable] = {
    NodeKind.root.value:             _blocks,
    NodeKind.paragraph.value:        lambda n: f"<p>{_inline(n)}</p>",
    NodeKind.heading.value:          lambda n: f"<h{n.depth}>{_inline(n)}</h{n.depth}>",
    NodeKind.thematic_break.value:   lambda n: "<hr>",
    NodeKind.blockquote.value:       lambda n: _wrap_blocks('blockquote', n),
    NodeKind.list.value:             _list,
    NodeKind.list_item.value:        lambda n: _list_item(n, tight=False),
    NodeKind.code.value:             _code,
    NodeKind.html.value:             lambda n: n.value,
    NodeKind.raw.value:              lambda n: n.value,
    NodeKind.table.value:            _table,
    NodeKind.table_row.value:        lambda n: f"<tr>{_inline(n)}</tr>",
    NodeKind.table_cell.value:       lambda n: f"<td>{_inline(n)}</td>",
    NodeKind.text.value:             lambda n: escapeHtml(n.value),
    NodeKind.emphasis.value:         lambda n: f"<em>{_inline(n)}</em>",
    NodeKind.strong.value:           lambda n: f"<strong>{_inline(n)}</strong>",
    NodeKind.delete.value:           lambda n: f"<del>{_inline(n)}</del>",
    NodeKind.inline_code.value:      lambda n: f"<code>{escapeHtml(n.value)}</code>",
    NodeKind.link.value:             lambda n: f"<a{_attrs(href=n.url, title=n.title)}>{_inline(n)}</a>",
    NodeKind.image.value:            lambda n: f"<img{_attrs(src=n.url, alt=n.alt, title=n.title)}>",
    NodeKind.break_.value:           lambda n: "<br>\n",
    NodeKind.mdxjs_esm.value:        _unrenderable,
    NodeKind.mdx_flow_expression.value: lambda n: escapeHtml(n.value),
    NodeKind.mdx_jsx_flow_element.value: _unrenderable,
}


def render_node(node) -> str:
    """Render a single node (and its subtree) to HTML."""
    return HANDLERS.get(node.type, _unknown)(node)


def to_html(root) -> str:
    """Render a Root (or any node) to an HTML string. Raises RenderError."""
    return render_node(root)
