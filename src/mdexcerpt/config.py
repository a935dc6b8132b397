"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDEXCERPT_"


class Settings(BaseModel):
    app_name:       str = "mdexcerpt"
    max_length:     int = Field(default=300, ge=1, description="Character budget for excerpts without a cut marker")
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    content_dir:    str = Field(default="src/data/blog", description="Directory of .md/.mdx posts")
    output_dir:     str = Field(default="dist/excerpts", description="Directory for excerpt sidecar JSON files")
    include_drafts: bool = Field(default=False, description="Also process posts with draft: true")


def _file_values(path: Path) -> dict[str, Any]:
    """Settings from a YAML mapping file; {} when the file does not exist."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Non-empty MDEXCERPT_<FIELD> environment variables, keyed by field name."""
    env = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in env.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDEXCERPT_<FIELD> env vars, then non-None CLI overrides."""
    data = {**_file_values(Path(CONFIG_FILE)), **_env_values()}
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
