"""
Project configuration loaded from tinct.toml.

Example::

    [build]
    brand_source = "tokens/brand.yaml"
    output_dir = "src/styles/generated"

    [css]
    dark_selector = ".dark"

    [runtime]
    themes_base_url = "https://cdn.example.com"
    scope = "shell"
    fetch_timeout = 5.0
    default_brand = "acme"

    [logging]
    level = "DEBUG"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

CONFIG_FILE = "tinct.toml"


@dataclass
class BuildConfig:
    """Token build configuration."""

    base_source: Path | None = None  # None = built-in base tokens
    brand_source: Path | None = None  # None = built-in brand tokens
    output_dir: Path = Path("generated")
    css_file: str = "tokens.css"
    preset_file: str = "preset.json"
    schema_file: str = "schema.json"
    utilities_file: str = "utilities.css"  # "" disables

    @property
    def css_path(self) -> Path:
        return self.output_dir / self.css_file

    @property
    def preset_path(self) -> Path:
        return self.output_dir / self.preset_file

    @property
    def schema_path(self) -> Path:
        return self.output_dir / self.schema_file

    @property
    def utilities_path(self) -> Path | None:
        return self.output_dir / self.utilities_file if self.utilities_file else None


@dataclass
class CssConfig:
    """Selectors used by the generated sheet and the scoping root."""

    root_selector: str = ":root"
    light_selector: str = ':root, [data-theme="light"]'
    dark_selector: str = '[data-theme="dark"]'


@dataclass
class RuntimeConfig:
    """Runtime brand loading configuration."""

    themes_base_url: str = ""
    scope: str = ""
    fetch_timeout: float = 10.0
    default_brand: str | None = None
    cookie_name: str = "tinct-theme"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_dir: Path | None = None


@dataclass
class TinctConfig:
    """Complete tinct.toml configuration."""

    build: BuildConfig = field(default_factory=BuildConfig)
    css: CssConfig = field(default_factory=CssConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _optional_path(root: Path, value: Any, key: str) -> Path | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string path")
    return root / value


def _string(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return value


def parse_config(data: dict[str, Any], root: Path) -> TinctConfig:
    """Build a TinctConfig from parsed TOML data, resolving paths against root."""
    build_data = _section(data, "build")
    css_data = _section(data, "css")
    runtime_data = _section(data, "runtime")
    logging_data = _section(data, "logging")

    defaults = BuildConfig()
    build = BuildConfig(
        base_source=_optional_path(root, build_data.get("base_source"), "build.base_source"),
        brand_source=_optional_path(root, build_data.get("brand_source"), "build.brand_source"),
        output_dir=root / _string(build_data, "output_dir", str(defaults.output_dir)),
        css_file=_string(build_data, "css_file", defaults.css_file),
        preset_file=_string(build_data, "preset_file", defaults.preset_file),
        schema_file=_string(build_data, "schema_file", defaults.schema_file),
        utilities_file=_string(build_data, "utilities_file", defaults.utilities_file),
    )

    css_defaults = CssConfig()
    css = CssConfig(
        root_selector=_string(css_data, "root_selector", css_defaults.root_selector),
        light_selector=_string(css_data, "light_selector", css_defaults.light_selector),
        dark_selector=_string(css_data, "dark_selector", css_defaults.dark_selector),
    )

    timeout = runtime_data.get("fetch_timeout", RuntimeConfig.fetch_timeout)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
        raise ConfigError(f"runtime.fetch_timeout must be a positive number, got {timeout!r}")

    default_brand = runtime_data.get("default_brand")
    if default_brand is not None and not isinstance(default_brand, str):
        raise ConfigError("runtime.default_brand must be a string")

    runtime = RuntimeConfig(
        themes_base_url=_string(runtime_data, "themes_base_url", ""),
        scope=_string(runtime_data, "scope", ""),
        fetch_timeout=float(timeout),
        default_brand=default_brand or None,
        cookie_name=_string(runtime_data, "cookie_name", RuntimeConfig.cookie_name),
    )

    logging_config = LoggingConfig(
        level=_string(logging_data, "level", LoggingConfig.level).upper(),
        log_dir=_optional_path(root, logging_data.get("log_dir"), "logging.log_dir"),
    )

    return TinctConfig(build=build, css=css, runtime=runtime, logging=logging_config)


def load_config(path: Path | None = None) -> TinctConfig:
    """
    Load tinct.toml.

    Args:
        path: Config file, or a directory containing tinct.toml.
            Defaults to ./tinct.toml.

    Returns:
        Parsed configuration; defaults when the file does not exist.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILE
    elif path.is_dir():
        path = path / CONFIG_FILE

    root = path.parent
    if not path.exists():
        config = parse_config({}, root)
        return config

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    config = parse_config(data, root)
    config.path = path
    return config
