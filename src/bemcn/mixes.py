"""Accepted shapes for ``Block.mix()``.

``mix()`` takes one of a small closed set of values. Each is classified into
a variant first, then turned into class tokens:

    Token          "js-menu"                    -> ["js-menu"]
    TokenList      ["a", "b", None]             -> ["a", "b", ""]
    ModifierMap    {"a": True, "size": "l"}     -> ["a", "size_l"]
    NestedBuilder  block("nav")({"open": True}) -> ["nav nav_open"]

A nested builder is rendered when the mix happens and mixed in as a single
token, whatever the config is at the later render.

"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bemcn.config import BemConfig, get_config
from bemcn.errors import MixTypeError
from bemcn.renderer import modifiers_to_list

if TYPE_CHECKING:
    from bemcn.builder import Block


@dataclass(frozen=True, slots=True)
class Token:
    """A single literal class token."""

    value: str


@dataclass(frozen=True, slots=True)
class TokenList:
    """Several literal class tokens."""

    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ModifierMap:
    """Flags mapping; each enabled key becomes a token."""

    flags: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class NestedBuilder:
    """Another block, mixed in by its rendered class string."""

    block: "Block"


type MixValue = Token | TokenList | ModifierMap | NestedBuilder


def classify(value: Any) -> MixValue:
    """Classify a raw ``mix()`` argument.

    Args:
        value: A str, list/tuple, mapping, or Block

    Returns:
        The matching variant.

    Raises:
        MixTypeError: If the value has none of the accepted shapes.
    """
    from bemcn.builder import Block

    match value:
        case Block():
            return NestedBuilder(value)
        case str():
            return Token(value)
        case list() | tuple():
            return TokenList(tuple("" if item is None else str(item) for item in value))
        case Mapping():
            return ModifierMap(value)
        case _:
            raise MixTypeError(value)


def to_tokens(mix: MixValue, config: BemConfig | None = None) -> tuple[str, ...]:
    """Turn a classified mix value into class tokens.

    Args:
        mix: Classified value
        config: Config for rendering maps and nested blocks
            (defaults to the active one)

    Returns:
        Tokens in order.
    """
    if config is None:
        config = get_config()

    match mix:
        case Token(value):
            return (value,)
        case TokenList(values):
            return values
        case ModifierMap(flags):
            return tuple(modifiers_to_list(flags, "", config=config))
        case NestedBuilder(block):
            return (block.to_string(config),)
    raise MixTypeError(mix)
