"""Immutable naming context for a block.

A BlockContext is the value a Block is bound to. Every operation returns a
new context; the receiver is never changed, so any Block in a chain can be
reused as the starting point of another chain.

Thread Safety:
    BlockContext is frozen and its fields are tuples, so instances are safe
    to share across threads.

"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

# One modifier spec: (key, value) pairs in the caller's iteration order
ModSpec = tuple[tuple[str, Any], ...]


@dataclass(frozen=True, slots=True)
class BlockContext:
    """Naming decisions accumulated for one block or element.

    Attributes:
        name: Fully qualified block/element name built so far
        mods: Modifier specs in the order they were added
        mixes: Extra class tokens in the order they were added
        states: State flags in first-insertion order, last value wins

    """

    name: str = ""
    mods: tuple[ModSpec, ...] = ()
    mixes: tuple[str, ...] = ()
    states: tuple[tuple[str, bool], ...] = ()

    def with_element(self, element: str, separator: str) -> "BlockContext":
        """Append an element to the name."""
        return replace(self, name=f"{self.name}{separator}{element}")

    def with_mods(self, spec: Mapping[str, Any]) -> "BlockContext":
        """Append one modifier spec.

        The mapping is snapshotted, so later changes to the caller's dict do
        not leak into the context.
        """
        return replace(self, mods=(*self.mods, tuple(spec.items())))

    def with_mixes(self, tokens: Iterable[str]) -> "BlockContext":
        """Append mix tokens after the existing ones."""
        return replace(self, mixes=(*self.mixes, *tokens))

    def with_states(self, states: Mapping[str, Any]) -> "BlockContext":
        """Merge state flags.

        Keys already present keep their position and take the new value;
        new keys are added at the end.
        """
        merged = dict(self.states)
        merged.update(states)
        return replace(self, states=tuple(merged.items()))

    def states_dict(self) -> dict[str, bool]:
        """Return the state flags as a plain dict."""
        return dict(self.states)
