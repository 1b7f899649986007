"""
Token source persistence.

Reads and writes token sources as YAML so projects can declare their own
base and brand tokens instead of the built-in ones.

Example brand source::

    name: brand
    tokens:
      color:
        primary: {light: "#10B981", dark: "#34D399"}
      font:
        body: "Inter, sans-serif"
        heading:
          fallback: "Inter, sans-serif"
          description: Heading font family
    computed_colors:
      primary-muted: {base: primary, opacity: 0.3}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tinct.core.config import BuildConfig
from tinct.core.errors import TokenSourceError

from .base import BASE_TOKENS
from .brand import BRAND_TOKENS
from .models import TokenSource

logger = logging.getLogger(__name__)


def _expand_definition(value: Any) -> Any:
    """Expand shorthand token entries into TokenDefinition-shaped dicts."""
    if isinstance(value, str):
        return {"fallback": value}
    if isinstance(value, dict) and "fallback" not in value and {"light", "dark"} & value.keys():
        return {"fallback": value}
    return value


def parse_token_source(data: dict[str, Any], default_name: str = "tokens") -> TokenSource:
    """
    Build a TokenSource from raw YAML data.

    Raises:
        TokenSourceError: If the structure or any token name is invalid.
    """
    if not isinstance(data, dict):
        raise TokenSourceError(f"Token source must be a mapping, got {type(data).__name__}")

    tokens = data.get("tokens", {}) or {}
    if not isinstance(tokens, dict):
        raise TokenSourceError("'tokens' must map categories to token tables")

    expanded: dict[str, dict[str, Any]] = {}
    for category, definitions in tokens.items():
        if not isinstance(definitions, dict):
            raise TokenSourceError(f"tokens.{category} must be a mapping of token names")
        expanded[category] = {
            str(name): _expand_definition(value) for name, value in definitions.items()
        }

    try:
        return TokenSource(
            name=str(data.get("name") or default_name),
            tokens=expanded,
            computed_colors=data.get("computed_colors") or {},
            keyframes=data.get("keyframes") or {},
        )
    except ValidationError as e:
        raise TokenSourceError(f"Invalid token source: {e}") from e


def load_token_source(path: Path) -> TokenSource:
    """
    Load a token source from a YAML file.

    Args:
        path: YAML file path.

    Returns:
        Parsed TokenSource; its name defaults to the file stem.

    Raises:
        TokenSourceError: If the file is missing, not YAML, or invalid.
    """
    if not path.exists():
        raise TokenSourceError(f"Token source not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise TokenSourceError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        raise TokenSourceError(f"Empty token source: {path}")

    source = parse_token_source(data, default_name=path.stem)
    logger.debug("Loaded %d tokens from %s", source.token_count(), path)
    return source


def save_token_source(path: Path, source: TokenSource) -> Path:
    """
    Save a token source to YAML.

    Args:
        path: Destination file.
        source: TokenSource to write.

    Returns:
        The written path.
    """
    data = source.model_dump(mode="json", exclude_none=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=True, allow_unicode=True),
        encoding="utf-8",
    )
    return path


def load_sources(build: BuildConfig) -> tuple[TokenSource, TokenSource]:
    """
    Load the (base, brand) sources named in the build config.

    Sources not configured fall back to the built-in definitions.
    """
    base = load_token_source(build.base_source) if build.base_source else BASE_TOKENS
    brand = load_token_source(build.brand_source) if build.brand_source else BRAND_TOKENS
    return base, brand
