"""markdown-it block rules for the MDX dialect: ESM, flow expressions, JSX elements"""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock


ESM_RE = re.compile(r'^(import|export)\b')
JSX_RE = re.compile(r'^<(?:([A-Z][\w.:-]*)|>)')


def _line(state: StateBlock, line: int) -> str:
    """Return the text of line after its leading indentation."""
    return state.src[state.bMarks[line] + state.tShift[line]:state.eMarks[line]]


def _paragraph_end(state: StateBlock, start: int, end: int) -> int:
    """Return the first blank line index at or after start (or end)."""
    line = start + 1
    while line < end and not state.isEmpty(line):
        line += 1
    return line


def _push(state: StateBlock, ttype: str, start: int, end: int, content: str, meta: dict = None) -> None:
    token = state.push(ttype, '', 0)
    token.map = [start, end]
    token.content = content
    token.meta = meta or {}
    state.line = end


def _indented(state: StateBlock, line: int) -> bool:
    """Lines indented 4+ columns past the block are code, not MDX."""
    return state.sCount[line] - state.blkIndent >= 4


def esm_rule(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
    """`import ...` / `export ...` statements, up to the next blank line."""
    if _indented(state, startLine) or not ESM_RE.match(_line(state, startLine)):
        return False
    if silent:
        return True
    end = _paragraph_end(state, startLine, endLine)
    _push(state, 'mdxjs_esm', startLine, end,
          state.getLines(startLine, end, state.blkIndent, False))
    return True


def flow_expression_rule(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
    """A `{...}` expression standing alone; may span lines until braces balance."""
    if _indented(state, startLine) or not _line(state, startLine).startswith('{'):
        return False

    depth = 0
    line = startLine
    while line < endLine and not state.isEmpty(line):
        text = _line(state, line)
        depth += text.count('{') - text.count('}')
        line += 1
        if depth <= 0:
            break
    if depth != 0 or not _line(state, line - 1).rstrip().endswith('}'):
        return False
    if silent:
        return True

    source = state.getLines(startLine, line, state.blkIndent, False).strip()
    _push(state, 'mdx_flow_expression', startLine, line, source[1:-1])
    return True


def jsx_flow_rule(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
    """A component element (`<Chart ... />`, `<>...</>`), up to the next blank line."""
    if _indented(state, startLine):
        return False
    m = JSX_RE.match(_line(state, startLine))
    if not m:
        return False
    if silent:
        return True
    end = _paragraph_end(state, startLine, endLine)
    _push(state, 'mdx_jsx_flow_element', startLine, end,
          state.getLines(startLine, end, state.blkIndent, False),
          meta={'name': m.group(1)})
    return True


def mdx_plugin(md: MarkdownIt) -> None:
    """Register the MDX block rules ahead of html_block (and so ahead of paragraph)."""
    md.block.ruler.before('html_block', 'mdx_esm', esm_rule)
    md.block.ruler.before('html_block', 'mdx_flow_expression', flow_expression_rule)
    md.block.ruler.before('html_block', 'mdx_jsx_flow', jsx_flow_rule)
