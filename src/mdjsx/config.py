"""Application configuration: settings schema, config.yaml loader, compiler config"""

import os
from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import BaseModel, Field

from mdjsx.core.options import CompilerConfig, build_config
from mdjsx.core.resolve import katex_resolver, link_resolver, make_filesystem_resolver, runtime_resolver
from mdjsx.core.stages import math_override, math_plugin, strip_metadata
from mdjsx.errors import ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:       str = "mdjsx"
    content_dir:    str = Field(default="src/mdx",        description="Directory scanned for .md/.mdx documents")
    output_dir:     str = Field(default="public/pages",   description="Directory for compiled components + pages.json")
    components_dir: str = Field(default="../components",  description="Import root for locally authored components")
    output_format:  str = Field(default="js", pattern="^(js|jsx)$", description="js or jsx")
    math:           bool = Field(default=True, description="Enable $...$ / $$...$$ math rendering")
    strip_metadata: bool = Field(default=True, description="Remove the metadata block from the body")
    max_workers:    int = Field(default=1, ge=1, description="Documents compiled concurrently")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDJSX_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDJSX_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid settings: {e}") from e


def compiler_config(settings: Settings) -> CompilerConfig:
    """Build the compiler configuration the site build uses for settings."""
    resolvers = [runtime_resolver, link_resolver]
    options: dict[str, Any] = {}
    if settings.math:
        resolvers.append(katex_resolver)
        options["parser_plugins"] = (math_plugin,)
        options["stringify_override"] = math_override
    if settings.strip_metadata:
        options["post_parse_stages"] = (strip_metadata,)
    resolvers.append(make_filesystem_resolver(settings.components_dir))
    return build_config(import_resolvers=tuple(resolvers), **options)
