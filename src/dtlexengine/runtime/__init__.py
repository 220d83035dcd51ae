"""Runtime: locale context, directive renderers, configuration, and the segment renderer.

Python 3.13+. Depends on Babel for CLDR data.
"""

from .config import FormatConfig, get_config, reset_config, set_config, using_config
from .locale_context import LocaleContext, LocaleLike, NameWidth
from .ordinal_rules import ORDINAL_SUFFIXES, ordinal
from .renderer import render, render_with_errors, resolve_locale

__all__ = [
    "ORDINAL_SUFFIXES",
    "FormatConfig",
    "LocaleContext",
    "LocaleLike",
    "NameWidth",
    "get_config",
    "ordinal",
    "render",
    "render_with_errors",
    "reset_config",
    "resolve_locale",
    "set_config",
    "using_config",
]
