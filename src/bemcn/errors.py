"""Exception classes for bemcn.

Most of the builder surface is permissive and ignores arguments it does
not understand. The exceptions here cover the few places where guessing
would produce a wrong class string.
"""

from __future__ import annotations

from typing import Any


class BemError(Exception):
    """Base exception for all bemcn errors."""

    pass


class MixTypeError(BemError, TypeError):
    """Value passed to ``Block.mix()`` has no class-token form.

    Accepted shapes are a string, a list or tuple of strings, a mapping of
    flags, or another Block.
    """

    def __init__(self, value: Any) -> None:
        """Initialize with the rejected value.

        Args:
            value: The argument that could not be mixed in
        """
        self.value = value
        super().__init__(f"Cannot mix value of type {type(value).__name__!r}: {value!r}")


class ConfigError(BemError):
    """Invalid configuration input.

    Raised when configuration options are not a mapping.
    """

    pass
