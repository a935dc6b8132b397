"""File discovery, frontmatter extraction, and markdown-it parsing into a document tree"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from mdexcerpt.core.mdx import mdx_plugin
from mdexcerpt.core.models import ParsedDoc, Root
from mdexcerpt.core.tree import tokens_to_tree
from mdexcerpt.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _make_parser(preset: str, mdx: bool = False) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, optionally with MDX rules."""
    md = MarkdownIt(preset, options_update={"linkify": False})
    if mdx:
        md.use(mdx_plugin)
    return md


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file.

    Files whose name starts with '_' are partials and are skipped.
    """
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(
        p for p in path.rglob('*')
        if p.suffix in MD_EXTENSIONS and not p.name.startswith('_')
    )


def parse_text(text: str, mdx: bool = False, parser_config: str = 'gfm-like') -> Root:
    """Parse markdown (or MDX when mdx=True) body text into a document tree."""
    return tokens_to_tree(_make_parser(parser_config, mdx).parse(text))


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc; .mdx files use the MDX dialect."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    tree = parse_text(body, mdx=path.suffix == '.mdx', parser_config=parser_config)
    slug = frontmatter.get('slug') or slugify(path.stem)
    return ParsedDoc(
        path=path,
        slug=slug,
        raw_markdown=raw,
        markdown=body,
        frontmatter=frontmatter,
        tree=tree,
    )
