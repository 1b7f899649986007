"""
tinct token compiler.

Usage:
    from tinct.compiler import compile_tokens
    from tinct.tokens import BASE_TOKENS, BRAND_TOKENS

    artifacts = compile_tokens(BASE_TOKENS, BRAND_TOKENS)
    artifacts.css_sheet      # custom-property sheet
    artifacts.preset_json    # utility preset
    artifacts.schema_json    # runtime payload schema
"""

from .compiler import CompiledArtifacts, compile_tokens
from .css_sheet import generate_css_sheet
from .preset import Preset, build_preset
from .schema import BrandThemeSchema, SchemaEntry, build_schema, load_schema
from .writer import stale_artifacts, write_artifacts

__all__ = [
    "BrandThemeSchema",
    "CompiledArtifacts",
    "Preset",
    "SchemaEntry",
    "build_preset",
    "build_schema",
    "compile_tokens",
    "generate_css_sheet",
    "load_schema",
    "stale_artifacts",
    "write_artifacts",
]
