"""Export: build and write the excerpt sidecar JSON for a post"""

import json
from datetime import date
from pathlib import Path
from urllib.parse import quote

from mdexcerpt.core.models import ExcerptResult, ParsedDoc, PostMeta
from mdexcerpt.core.utils.paths import post_path


def _json_default(value):
    """Serialize YAML date/datetime frontmatter values as ISO strings."""
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_sidecar(doc: ParsedDoc, meta: PostMeta) -> dict:
    """Build the sidecar dict: slug, path, url, frontmatter, excerptHtml, hasMoreSeparator.

    url is None when the post has no pubDate.
    """
    excerpt = ExcerptResult.model_validate(doc.data)
    return {
        "slug": doc.slug,
        "path": str(doc.path),
        "url": post_path(meta.pub_date, doc.slug) if meta.pub_date else None,
        "frontmatter": doc.frontmatter,
        **excerpt.model_dump(by_alias=True),
    }


def sidecar_name(slug: str) -> str:
    """Filename for a post's sidecar; path separators in the slug are percent-encoded."""
    return f"{quote(slug, safe='')}.json"


def sidecar_path(doc: ParsedDoc, output_dir: Path, source_root: Path = None) -> Path:
    """Output path mirroring the source directory structure relative to source_root:
      output_dir / <relative parent> / <encoded slug>.json
    """
    src = Path(doc.path)
    parent = src.parent.relative_to(source_root) if source_root else Path()
    return output_dir / parent / sidecar_name(doc.slug)


def write_doc(doc: ParsedDoc, meta: PostMeta, output_dir: Path, source_root: Path = None) -> Path:
    """Write the sidecar JSON for a single post and return its path."""
    json_path = sidecar_path(doc, output_dir, source_root)
    json_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(
        json.dumps(build_sidecar(doc, meta), indent=2, ensure_ascii=False, default=_json_default),
        encoding='utf-8',
    )
    return json_path
