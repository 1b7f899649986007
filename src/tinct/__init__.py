"""
tinct: design token compilation and runtime brand theming.

Build time:
    tinct build   # writes tokens.css, preset.json, schema.json

Runtime:
    from tinct.runtime import ThemeManager
"""

from tinct._version import get_version

__version__ = get_version()

__all__ = ["__version__"]
