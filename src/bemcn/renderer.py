"""Class string rendering.

Turns a BlockContext into the final class string. Rendering is a pure
function of the context and the config passed in (or the active config when
none is given), so the same context renders differently after ``setup()``.

Token order:
    1. ``ns + name``
    2. one ``ns + name + mod + key[+ mod_value + value]`` per modifier flag
    3. mix tokens
    4. ``is-<state>`` per enabled state

Example:
    >>> from bemcn.context import BlockContext
    >>> ctx = BlockContext("menu__item").with_mods({"theme": "dark"})
    >>> render(ctx)
    'menu__item menu__item_theme_dark'

"""

from collections.abc import Iterable, Mapping
from typing import Any

from bemcn.classlist import ClassListBuilder
from bemcn.config import BemConfig, get_config
from bemcn.context import BlockContext

STATE_PREFIX = "is-"


def modifiers_to_list(
    spec: Mapping[str, Any] | Iterable[tuple[str, Any]],
    separator: str | None = None,
    *,
    config: BemConfig | None = None,
) -> list[str]:
    """Convert a modifier spec to class-name suffixes.

    Falsy values are skipped. ``True`` gives ``separator + key``; any other
    value gives ``separator + key + mod_value + str(value)``.
    Values use Python formatting, so ``1.0`` renders as ``1.0``, not ``1``.

    Args:
        spec: Mapping of modifier key to flag/value, or its (key, value) pairs
        separator: Prefix for each suffix (defaults to ``config.mod``)
        config: Config to read separators from (defaults to the active one)

    Returns:
        Suffixes in the spec's key order.

    Example:
        >>> modifiers_to_list({"color": "red", "big": True, "hidden": False})
        ['_color_red', '_big']
        >>> modifiers_to_list({"color": "red"}, "")
        ['color_red']
    """
    if config is None:
        config = get_config()
    if separator is None:
        separator = config.mod

    items = spec.items() if isinstance(spec, Mapping) else spec
    suffixes: list[str] = []
    for key, value in items:
        if not value:
            continue
        if value is True:
            suffixes.append(f"{separator}{key}")
        else:
            suffixes.append(f"{separator}{key}{config.mod_value}{value}")
    return suffixes


def render(context: BlockContext, config: BemConfig | None = None) -> str:
    """Render a context to a space-separated class string.

    Args:
        context: Context to render
        config: Config to render with (defaults to the active one)

    Returns:
        Class string
    """
    if config is None:
        config = get_config()

    name = f"{config.ns}{context.name}"
    classes = ClassListBuilder(name)

    for spec in context.mods:
        classes.extend(name + suffix for suffix in modifiers_to_list(spec, config=config))

    classes.extend(context.mixes)

    classes.extend(f"{STATE_PREFIX}{state}" for state, enabled in context.states if enabled)

    return classes.build()
