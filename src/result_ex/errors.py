"""Error types: struct reasons carried in Err, and the unwrap exception."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'ArityError',
    'UnknownShape',
    'UnwrapError',
]


# --- Structural errors (returned as Err payloads, never raised) ---


class ArityError(msgspec.Struct, frozen=True, gc=False):
    """appl received a function that cannot consume an applied value.

    `arity` is 0 for a function taking no positional arguments, and None
    when no arity could be read from the value at all.
    """

    function: str
    arity: int | None = 0

    def __str__(self) -> str:
        if self.arity is None:
            return f'appl: arity error ({self.function} has no inspectable arity)'
        return f'appl: arity error ({self.function} takes {self.arity} arguments)'


class UnknownShape(msgspec.Struct, frozen=True, gc=False):
    """flatten_enum received something other than a sequence or mapping of Results."""

    type_name: str

    def __str__(self) -> str:
        return f'flatten_enum: unknown type {self.type_name}'


# --- Fatal escape ---


class UnwrapError(Exception):
    """Raised by unwrap/expect when called on an Err.

    `reason` holds the Err payload for unwrap, or the caller's message for
    expect.
    """

    def __init__(self, reason: Any) -> None:
        self.reason = reason
        super().__init__(reason if isinstance(reason, str) else repr(reason))
