"""markdown-it token stream to document tree conversion"""

from markdown_it.tree import SyntaxTreeNode

from mdexcerpt.core.models import (
    Blockquote, Break, Code, Delete, Emphasis, Heading, Html, Image, InlineCode, Link, List,
    ListItem, MdxFlowExpression, MdxJsxFlowElement, MdxjsEsm, Paragraph, Root, Strong, Table,
    TableCell, TableRow, Text, ThematicBreak, Unknown,
)


def _inline_children(node: SyntaxTreeNode) -> list:
    """Convert the `inline` child of a paragraph/heading/cell to inline nodes."""
    if not node.children:
        return []
    return _merge_text([_inline(c) for c in node.children[0].children])


def _merge_text(nodes: list) -> list:
    """Join adjacent text nodes (soft breaks arrive as separate '\\n' texts)."""
    merged = []
    for n in nodes:
        if merged and isinstance(n, Text) and isinstance(merged[-1], Text):
            merged[-1] = Text(value=merged[-1].value + n.value)
        else:
            merged.append(n)
    return merged


def _inline(node: SyntaxTreeNode):
    t = node.type
    if t == 'text':
        return Text(value=node.content)
    if t == 'softbreak':
        return Text(value='\n')
    if t == 'hardbreak':
        return Break()
    if t == 'code_inline':
        return InlineCode(value=node.content)
    if t == 'html_inline':
        return Html(value=node.content)
    if t == 'image':
        return Image(url=str(node.attrs.get('src', '')), alt=node.content,
                     title=node.attrs.get('title'))
    children = _merge_text([_inline(c) for c in node.children])
    if t == 'strong':
        return Strong(children=children)
    if t == 'em':
        return Emphasis(children=children)
    if t == 's':
        return Delete(children=children)
    if t == 'link':
        return Link(url=str(node.attrs.get('href', '')), title=node.attrs.get('title'),
                    children=children)
    return Unknown(type=t, value=node.content or None, children=children)


def _cell_align(node: SyntaxTreeNode) -> str | None:
    """Extract column alignment from a th/td `style="text-align:..."` attribute."""
    style = str(node.attrs.get('style', ''))
    return style.split(':', 1)[1] if style.startswith('text-align:') else None


def _table(node: SyntaxTreeNode) -> Table:
    rows, align = [], []
    for section in node.children:                   # thead, tbody
        for tr in section.children:
            cells = [TableCell(children=_inline_children(c)) for c in tr.children]
            if not rows:
                align = [_cell_align(c) for c in tr.children]
            rows.append(TableRow(children=cells))
    return Table(align=align, children=rows)


def _list(node: SyntaxTreeNode) -> List:
    ordered = node.type == 'ordered_list'
    items = [ListItem(children=[_block(c) for c in item.children]) for item in node.children]
    # markdown-it hides item paragraphs of tight lists
    tight = all(
        p.hidden for item in node.children for p in item.children if p.type == 'paragraph'
    )
    start = int(node.attrs.get('start', 1)) if ordered else None
    return List(ordered=ordered, start=start, tight=tight, children=items)


def _block(node: SyntaxTreeNode):
    t = node.type
    if t == 'paragraph':
        return Paragraph(children=_inline_children(node))
    if t == 'heading':
        return Heading(depth=int(node.tag[1:]), children=_inline_children(node))
    if t == 'hr':
        return ThematicBreak()
    if t == 'blockquote':
        return Blockquote(children=[_block(c) for c in node.children])
    if t in ('bullet_list', 'ordered_list'):
        return _list(node)
    if t == 'fence':
        lang = node.info.strip().split()[0] if node.info.strip() else None
        return Code(lang=lang, value=node.content.removesuffix('\n'))
    if t == 'code_block':
        return Code(value=node.content.removesuffix('\n'))
    if t == 'html_block':
        return Html(value=node.content.rstrip('\n'))
    if t == 'table':
        return _table(node)
    if t == 'mdxjs_esm':
        return MdxjsEsm(value=node.content)
    if t == 'mdx_flow_expression':
        return MdxFlowExpression(value=node.content)
    if t == 'mdx_jsx_flow_element':
        return MdxJsxFlowElement(name=node.meta.get('name'), value=node.content)
    return Unknown(type=t, value=node.content or None, children=[_block(c) for c in node.children])


def tokens_to_tree(tokens: list) -> Root:
    """Convert a markdown-it token stream into a Root of block nodes."""
    return Root(children=[_block(c) for c in SyntaxTreeNode(tokens).children])
