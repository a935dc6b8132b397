"""Pipeline step functions: parse, excerpt, and export orchestration"""

import logging
from pathlib import Path

from pydantic import ValidationError

from mdexcerpt.core.excerpt.excerpt import apply_excerpt
from mdexcerpt.core.export import sidecar_path, write_doc
from mdexcerpt.core.models import ParsedDoc, PostMeta
from mdexcerpt.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def excerpt_file(path: Path, max_length: int, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Parse a single post and attach its excerpt fields to doc.data."""
    doc = parse_file(path, parser_config)
    apply_excerpt(doc, max_length)
    return doc


def _post_meta(doc: ParsedDoc) -> PostMeta:
    try:
        return PostMeta.model_validate(doc.frontmatter)
    except ValidationError as e:
        raise ValueError(f"Invalid post frontmatter: {e}") from e


def run_excerpt(
    path: str,
    output_dir: Path,
    max_length: int,
    parser_config: str = 'gfm-like',
    include_drafts: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Excerpt every post under path and write sidecar JSON. Returns (source_path, json_file) pairs.

    Drafts are skipped unless include_drafts is set. Posts sharing a slug in one directory
    share a sidecar; the later one wins and a warning is logged.
    """
    root = Path(path)
    source_root = root if root.is_dir() else root.parent
    results = []
    written: dict[Path, Path] = {}
    for p in discover_files(root):
        try:
            doc = excerpt_file(p, max_length, parser_config)
            meta = _post_meta(doc)
            if meta.draft and not include_drafts:
                logger.debug("skipping draft %s", p)
                continue
            target = sidecar_path(doc, output_dir, source_root)
            if target in written:
                logger.warning("%s overwrites %s: both write %s", p, written[target], target)
            out_file = write_doc(doc, meta, output_dir, source_root)
            written[out_file] = p
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to excerpt {p}: {e}") from e
    return results
