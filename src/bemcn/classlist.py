"""ClassListBuilder for space-separated class strings.

Collects class tokens in a list and joins them once at the end, the same
append-then-join approach used for any repeated string accumulation.

Unlike a general string builder, empty tokens are kept: an empty mix token
must still contribute its separating space so output stays stable.

Thread Safety:
ClassListBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class ClassListBuilder:
    """Space-separated class token accumulator.
    
    Usage:
            >>> cl = ClassListBuilder("menu")
            >>> _ = cl.append("menu_open").extend(["js-menu", "clearfix"])
            >>> cl.build()
            'menu menu_open js-menu clearfix'
    
    """

    __slots__ = ("_tokens",)

    def __init__(self, first: str | None = None) -> None:
        """Initialize the builder, optionally with a leading token."""
        self._tokens: list[str] = [] if first is None else [first]

    def append(self, token: str) -> ClassListBuilder:
        """Append one class token.

        Args:
            token: Class token (kept even when empty)

        Returns:
            self for method chaining
        """
        self._tokens.append(token)
        return self

    def extend(self, tokens: Iterable[str]) -> ClassListBuilder:
        """Append several class tokens in order.

        Args:
            tokens: Class tokens to append

        Returns:
            self for method chaining
        """
        self._tokens.extend(tokens)
        return self

    def build(self, separator: str = " ") -> str:
        """Join all tokens into the final class string."""
        return separator.join(self._tokens)

    def __len__(self) -> int:
        """Return number of tokens."""
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)
