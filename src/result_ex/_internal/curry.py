"""Curry engine used by appl.

A multi-argument function receives its arguments one at a time. Each step
either saturates the function and returns the call result, or returns a new
`Curried` holding the arguments so far.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['Curried', 'arity', 'curry', 'describe']

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity(fn: object) -> int | None:
    """Return the number of required positional parameters of fn.

    Parameters with defaults, *args, **kwargs and keyword-only parameters
    are not counted. Returns None when fn is not callable or its signature
    cannot be read (some builtins).
    """
    if not callable(fn):
        return None
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def describe(fn: object) -> str:
    """Readable name for fn, used in error reasons and logs."""
    return getattr(fn, '__qualname__', None) or repr(fn)


class Curried:
    """A function partially applied to its first arguments.

    Calling it with one more argument either invokes the target (when all
    `arity` arguments are present, in the order they were supplied) or
    returns a new Curried. The target's arity is fixed at first application.

    Examples:
        >>> add3 = Curried(lambda a, b, c: a + b + c, 3, (1,))
        >>> add3(2)(3)
        6
    """

    __slots__ = ('_args', '_arity', '_fn')

    def __init__(self, fn: Callable[..., Any], arity: int, args: tuple[Any, ...] = ()) -> None:
        self._fn = fn
        self._arity = arity
        self._args = args

    @property
    def fn(self) -> Callable[..., Any]:
        """The target function."""
        return self._fn

    @property
    def arity(self) -> int:
        """Total number of arguments the target takes."""
        return self._arity

    @property
    def args(self) -> tuple[Any, ...]:
        """Arguments supplied so far, first-supplied first."""
        return self._args

    def __call__(self, arg: Any) -> Any:
        args = (*self._args, arg)
        if len(args) == self._arity:
            return self._fn(*args)
        return Curried(self._fn, self._arity, args)

    def __repr__(self) -> str:
        return f'Curried({describe(self._fn)}, args={self._args!r}, arity={self._arity})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Curried):
            return (self._fn, self._arity, self._args) == (other._fn, other._arity, other._args)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Curried', self._fn, self._arity, self._args))


def curry(fn: Callable[..., Any], value: Any, fn_arity: int) -> Any:
    """Apply value as the first argument of fn, which takes fn_arity arguments."""
    return Curried(fn, fn_arity)(value)
