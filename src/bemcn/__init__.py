"""
bemcn: BEM class-name builder

Composes Block__Element_Modifier class strings from chained calls.
Pure string composition, no runtime dependencies.

Quick Start:
    >>> from bemcn import block
    >>> b = block("menu")
    >>> str(b("item", {"theme": "dark"}).mix(["extra"]).state({"open": True}))
    'menu__item menu__item_theme_dark extra is-open'

    >>> b("item").split()
    ['menu__item']

Configuration:
    >>> from bemcn import setup
    >>> b = setup({"ns": "app-"})
    >>> str(b("menu"))
    'app-menu'
    >>> _ = setup({"ns": ""})

    Scoped overrides (thread-local) use ``config_context``:

    >>> from bemcn import BemConfig, config_context
    >>> with config_context(BemConfig(el="-")):
    ...     str(block("menu")("item"))
    'menu-item'
"""

from bemcn.builder import Block, block, setup
from bemcn.config import (
    BemConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from bemcn.context import BlockContext
from bemcn.errors import BemError, ConfigError, MixTypeError
from bemcn.renderer import STATE_PREFIX, modifiers_to_list, render

__version__ = "0.1.0"

__all__ = [
    "STATE_PREFIX",
    "BemConfig",
    "BemError",
    "Block",
    "BlockContext",
    "ConfigError",
    "MixTypeError",
    "__version__",
    "block",
    "config_context",
    "get_config",
    "modifiers_to_list",
    "render",
    "reset_config",
    "set_config",
    "setup",
]
