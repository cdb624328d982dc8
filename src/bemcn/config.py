"""Naming configuration for bemcn.

Holds the four punctuation tokens used when composing class names:
namespace prefix, element separator, modifier separator, and modifier
value separator.

Two layers:
    - A process-wide config, changed with ``setup()``. Every render in the
      process reads it, including renders of blocks built before the change.
    - A scoped override via ``config_context()``, backed by a ContextVar.
      While active it shadows the process-wide config for the current
      thread/context only.

Usage:
    # Process-wide
    from bemcn import block, setup

    setup({"ns": "app-", "mod": "--"})
    str(block("menu")({"open": True}))  # 'app-menu app-menu--open'

    # Scoped (tests, isolated renders)
    from bemcn.config import BemConfig, config_context

    with config_context(BemConfig(el="-")):
        str(block("menu")("item"))  # 'menu-item'

Thread Safety:
    ``setup()`` is an unsynchronized last-writer-wins replacement of a
    module-level reference. Callers sharing a process across threads must
    serialize their own ``setup()`` calls. ``config_context()`` is
    thread-local by design.

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Any

from bemcn.errors import ConfigError
from bemcn.utils.logger import get_logger

logger = get_logger(__name__)

# Option names accepted from plain dicts, mapped to BemConfig fields
_OPTION_ALIASES: dict[str, str] = {
    "modValue": "mod_value",
}


@dataclass(frozen=True, slots=True)
class BemConfig:
    """Immutable naming configuration.

    Attributes:
        ns: Namespace prefix added in front of every generated block class
        el: Separator between a block and its element
        mod: Separator between a block/element and its modifier
        mod_value: Separator between a modifier key and its value

    """

    ns: str = ""
    el: str = "__"
    mod: str = "_"
    mod_value: str = "_"

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "BemConfig":
        """Create a BemConfig from a dictionary of options.

        Accepts field names and the camelCase ``modValue`` alias.
        Unknown keys are ignored.

        Args:
            options: Mapping of option name to value

        Returns:
            New BemConfig with defaults for missing options.

        Raises:
            ConfigError: If options is not a mapping.

        Example:
            >>> BemConfig.from_dict({"ns": "b-", "modValue": "-"}).mod_value
            '-'

        """
        return cls().merge(options)

    def merge(self, options: Mapping[str, Any] | None) -> "BemConfig":
        """Return a copy with options shallow-merged over this config.

        Values are taken as-is; no type checks are made.

        Args:
            options: Any subset of the config options, or None

        Returns:
            New BemConfig (self if there is nothing to merge).

        Raises:
            ConfigError: If options is not a mapping.

        """
        if not options:
            return self
        if not isinstance(options, Mapping):
            raise ConfigError(
                f"Options must be a mapping, got {type(options).__name__}"
            )

        valid_fields = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in valid_fields:
                logger.debug("Ignoring unknown config option %r", key)
                continue
            changes[name] = value
        return replace(self, **changes) if changes else self


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BemConfig = BemConfig()

# Process-wide config, replaced wholesale by setup()
_global_config: BemConfig = _DEFAULT_CONFIG

# Scoped override; None means "use the process-wide config"
_config_override: ContextVar[BemConfig | None] = ContextVar(
    "bem_config_override",
    default=None,
)


def get_config() -> BemConfig:
    """Get the config that applies to renders in this context.

    Returns:
        The scoped override if one is active, else the process-wide config.

    """
    override = _config_override.get()
    if override is not None:
        return override
    return _global_config


def set_config(config: BemConfig) -> None:
    """Replace the process-wide config.

    Args:
        config: BemConfig instance to use from now on.

    """
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Restore the process-wide config to its defaults."""
    set_config(_DEFAULT_CONFIG)


def merge_config(options: Mapping[str, Any] | None) -> BemConfig:
    """Shallow-merge options into the process-wide config.

    Args:
        options: Any subset of ``ns``, ``el``, ``mod``, ``modValue``/``mod_value``

    Returns:
        The new process-wide config.

    """
    config = _global_config.merge(options)
    logger.debug("Naming config is now %r", config)
    set_config(config)
    return config


@contextmanager
def config_context(config: BemConfig) -> Iterator[BemConfig]:
    """Context manager for a temporary, context-local config.

    Args:
        config: BemConfig to use within the block.

    Yields:
        The active config.

    Example:
        >>> with config_context(BemConfig(ns="x-")):
        ...     get_config().ns
        'x-'

    Thread Safety:
        Only affects the current thread's context. The previous value is
        restored even if an exception is raised.

    """
    token = _config_override.set(config)
    try:
        yield config
    finally:
        _config_override.reset(token)


__all__ = [
    "BemConfig",
    "config_context",
    "get_config",
    "merge_config",
    "reset_config",
    "set_config",
]
