"""Document tree node models and intermediate parse results"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator


class NodeKind(str, Enum):
    """Closed set of node kinds the parser emits and the renderer understands"""
    root = "root"
    paragraph = "paragraph"
    heading = "heading"
    thematic_break = "thematicBreak"
    blockquote = "blockquote"
    list = "list"
    list_item = "listItem"
    code = "code"
    html = "html"
    raw = "raw"
    table = "table"
    table_row = "tableRow"
    table_cell = "tableCell"
    text = "text"
    emphasis = "emphasis"
    strong = "strong"
    delete = "delete"
    inline_code = "inlineCode"
    link = "link"
    image = "image"
    break_ = "break"
    mdxjs_esm = "mdxjsEsm"
    mdx_flow_expression = "mdxFlowExpression"
    mdx_jsx_flow_element = "mdxJsxFlowElement"


# Embedded-dialect nodes with no standalone static HTML form.
UNRENDERABLE_KINDS = frozenset({NodeKind.mdxjs_esm, NodeKind.mdx_jsx_flow_element})


class _Node(BaseModel):
    pass


# --- literal nodes ---

class Text(_Node):
    type: Literal["text"] = "text"
    value: str


class InlineCode(_Node):
    type: Literal["inlineCode"] = "inlineCode"
    value: str


class Code(_Node):
    type: Literal["code"] = "code"
    value: str
    lang: Optional[str] = None


class Html(_Node):
    """Raw HTML as written in the source (block or inline)."""
    type: Literal["html"] = "html"
    value: str


class Raw(_Node):
    """Raw passthrough markup inserted by other tree transforms."""
    type: Literal["raw"] = "raw"
    value: str


class MdxjsEsm(_Node):
    type: Literal["mdxjsEsm"] = "mdxjsEsm"
    value: str


class MdxFlowExpression(_Node):
    type: Literal["mdxFlowExpression"] = "mdxFlowExpression"
    value: str                      # expression source without the outer braces


class MdxJsxFlowElement(_Node):
    type: Literal["mdxJsxFlowElement"] = "mdxJsxFlowElement"
    name: Optional[str] = None      # None for fragments (<>...</>)
    value: str                      # element source


class ThematicBreak(_Node):
    type: Literal["thematicBreak"] = "thematicBreak"


class Break(_Node):
    type: Literal["break"] = "break"


class Image(_Node):
    type: Literal["image"] = "image"
    url: str
    alt: str = ""
    title: Optional[str] = None


# --- parent nodes ---

class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    children: list[Node] = []


class Heading(_Node):
    type: Literal["heading"] = "heading"
    depth: int = Field(ge=1, le=6)
    children: list[Node] = []


class Blockquote(_Node):
    type: Literal["blockquote"] = "blockquote"
    children: list[Node] = []


class ListItem(_Node):
    type: Literal["listItem"] = "listItem"
    children: list[Node] = []


class List(_Node):
    type: Literal["list"] = "list"
    ordered: bool = False
    start: Optional[int] = None
    tight: bool = True              # tight lists render item paragraphs without <p>
    children: list[Node] = []


class TableCell(_Node):
    type: Literal["tableCell"] = "tableCell"
    children: list[Node] = []


class TableRow(_Node):
    type: Literal["tableRow"] = "tableRow"
    children: list[Node] = []


class Table(_Node):
    type: Literal["table"] = "table"
    align: list[Optional[str]] = []     # per column: left, right, center or None
    children: list[Node] = []           # first row is the header row


class Emphasis(_Node):
    type: Literal["emphasis"] = "emphasis"
    children: list[Node] = []


class Strong(_Node):
    type: Literal["strong"] = "strong"
    children: list[Node] = []


class Delete(_Node):
    type: Literal["delete"] = "delete"
    children: list[Node] = []


class Link(_Node):
    type: Literal["link"] = "link"
    url: str
    title: Optional[str] = None
    children: list[Node] = []


class Root(_Node):
    type: Literal["root"] = "root"
    children: list[Node] = []


class Unknown(_Node):
    """Opaque node of a kind outside NodeKind; kept and measured, never special-cased."""
    model_config = ConfigDict(extra="allow")
    type: str
    value: Optional[str] = None
    children: list[Node] = []


NODE_CLASSES: dict[str, type[_Node]] = {
    NodeKind.root.value: Root,
    NodeKind.paragraph.value: Paragraph,
    NodeKind.heading.value: Heading,
    NodeKind.thematic_break.value: ThematicBreak,
    NodeKind.blockquote.value: Blockquote,
    NodeKind.list.value: List,
    NodeKind.list_item.value: ListItem,
    NodeKind.code.value: Code,
    NodeKind.html.value: Html,
    NodeKind.raw.value: Raw,
    NodeKind.table.value: Table,
    NodeKind.table_row.value: TableRow,
    NodeKind.table_cell.value: TableCell,
    NodeKind.text.value: Text,
    NodeKind.emphasis.value: Emphasis,
    NodeKind.strong.value: Strong,
    NodeKind.delete.value: Delete,
    NodeKind.inline_code.value: InlineCode,
    NodeKind.link.value: Link,
    NodeKind.image.value: Image,
    NodeKind.break_.value: Break,
    NodeKind.mdxjs_esm.value: MdxjsEsm,
    NodeKind.mdx_flow_expression.value: MdxFlowExpression,
    NodeKind.mdx_jsx_flow_element.value: MdxJsxFlowElement,
}


def _node_tag(value: Any) -> str:
    """Discriminator: known kinds by their type string, anything else as 'unknown'."""
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in NODE_CLASSES and not isinstance(value, Unknown):
        return kind
    return "unknown"


Node = Annotated[
    Union[tuple(Annotated[cls, Tag(kind)] for kind, cls in NODE_CLASSES.items())
          + (Annotated[Unknown, Tag("unknown")],)],
    Discriminator(_node_tag),
]

for _cls in (*NODE_CLASSES.values(), Unknown):
    _cls.model_rebuild()


class PostMeta(BaseModel):
    """Frontmatter fields of a blog post; unknown keys are preserved."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    title: Optional[str] = None
    description: Optional[str] = None
    slug: Optional[str] = None
    draft: bool = False
    pub_date: Optional[date] = Field(default=None, alias="pubDate")
    updated_date: Optional[date] = Field(default=None, alias="updatedDate")
    tags: list[str] = []

    @field_validator("pub_date", "updated_date", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        """YAML timestamps arrive as datetimes; only the calendar date is kept."""
        return value.date() if isinstance(value, datetime) else value


class ExcerptResult(BaseModel):
    """Excerpt fields published on a document's side-channel metadata."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    excerpt_html: str = Field(default="", alias="excerptHtml")
    has_more_separator: bool = Field(default=False, alias="hasMoreSeparator")


@dataclass
class ParsedDoc:
    """Internal parse result carrying the node tree; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    frontmatter:  dict[str, Any]
    tree:         Root
    data:         dict[str, Any] = field(default_factory=dict)   # excerptHtml, hasMoreSeparator
