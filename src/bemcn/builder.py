"""Chainable BEM class-name builder.

A Block is a thin callable wrapper bound to one immutable BlockContext.
Every operation returns a new Block, so intermediate blocks can be stored
and reused freely:

    >>> menu = block("menu")
    >>> item = menu("item")
    >>> str(item({"active": True}))
    'menu__item menu__item_active'
    >>> str(item.mix("js-item").state({"open": True}))
    'menu__item js-item is-open'
    >>> str(menu)
    'menu'

Rendering reads the active config at render time (see bemcn.config).

Thread Safety:
    Blocks hold no mutable state and are safe to share across threads.

"""

from collections.abc import Callable, Mapping
from typing import Any

from bemcn.config import BemConfig, get_config, merge_config
from bemcn.context import BlockContext
from bemcn.mixes import classify, to_tokens
from bemcn.renderer import render
from bemcn.utils.logger import get_logger

logger = get_logger(__name__)


class Block:
    """Callable, immutable builder of one block's class string.

    Call it with element names (str) and modifier specs (mappings), in any
    order; each argument is applied left to right:

        >>> str(block("form")("field", {"type": "text"}, "label"))
        'form__field__label form__field__label_type_text'

    """

    __slots__ = ("_context",)

    def __init__(self, context: BlockContext) -> None:
        self._context = context

    @property
    def context(self) -> BlockContext:
        """The immutable context this block is bound to."""
        return self._context

    def __call__(self, *args: Any) -> "Block":
        """Append elements and modifiers.

        Non-empty strings append an element using the current element
        separator. Non-empty mappings add one modifier spec. Anything else
        is ignored.

        Returns:
            New Block
        """
        context = self._context
        for arg in args:
            if arg and isinstance(arg, str):
                context = context.with_element(arg, get_config().el)
            elif arg and isinstance(arg, Mapping):
                context = context.with_mods(arg)
            elif arg:
                logger.debug("Ignoring block argument of type %s", type(arg).__name__)
        return Block(context)

    def mix(self, value: Any) -> "Block":
        """Mix in extra class tokens.

        Args:
            value: A class name, a list/tuple of class names, a mapping of
                flags (``{"a": True, "size": "l"}`` mixes ``a size_l``), or
                another Block. Falsy values are a no-op.

        Returns:
            New Block

        Raises:
            MixTypeError: If value is truthy but has none of the shapes above.
        """
        if not value:
            return Block(self._context)
        return Block(self._context.with_mixes(to_tokens(classify(value))))

    def state(self, states: Mapping[str, bool] | None = None) -> "Block":
        """Set ``is-*`` state flags.

        Later calls override earlier values for the same key.

        Args:
            states: Mapping of state name to flag

        Returns:
            New Block
        """
        return Block(self._context.with_states(states or {}))

    def to_string(self, config: BemConfig | None = None) -> str:
        """Render the class string.

        Args:
            config: Config to render with (defaults to the active one)
        """
        return render(self._context, config)

    def split(self, sep: str | None = None, maxsplit: int = -1) -> list[str]:
        """Render and split, with the same arguments as ``str.split``.

        ``maxsplit`` is the number of splits, and the remainder stays in the
        last item: ``split(" ", 1)`` on ``"a b c"`` gives ``["a", "b c"]``.
        """
        return self.to_string().split(sep, maxsplit)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)

    def __html__(self) -> str:
        # Markup-aware template engines call this instead of escaping str()
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._context == other._context

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Block({self._context!r})"


def block(name: str = "") -> Block:
    """Create a builder for a block.

    Args:
        name: Block name, used verbatim

    Returns:
        New Block with no elements, modifiers, mixes or states

    Example:
        >>> str(block("menu"))
        'menu'
    """
    return Block(BlockContext(name))


def setup(options: Mapping[str, Any] | None = None) -> Callable[..., Block]:
    """Merge naming options into the process-wide config.

    Args:
        options: Any subset of ``ns``, ``el``, ``mod``, ``modValue``
            (or ``mod_value``). Omitted options keep their current value.

    Returns:
        The ``block`` entry point, for chaining:
        ``b = setup({"ns": "app-"})``

    Example:
        >>> b = setup({"mod": "--"})
        >>> str(b("menu")({"open": True}))
        'menu menu--open'
        >>> _ = setup({"mod": "_"})
    """
    merge_config(options)
    return block


block.setup = setup  # type: ignore[attr-defined]
