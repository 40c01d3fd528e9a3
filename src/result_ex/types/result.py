"""Result type: Ok[T] | Err[E] for railway-oriented error handling."""

from __future__ import annotations

from typing import TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'is_result', 'ok', 'return_']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok carries the outcome of an operation that completed. The value may be
    anything, including a function (see `appl`), another Result (see
    `flatten`) or a collection of Results (see `flatten_enum`).

    Examples:
        >>> Ok(42)
        Ok(value=42)
        >>> Ok(42) == Ok(42)
        True
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error is opaque to the library: combinators pass it through
    untouched until a recovery or escape operation consumes it.

    Examples:
        >>> Err('Oops')
        Err(error='Oops')
        >>> Err('Oops').is_err()
        True
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True


type Result[T, E = object] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Elevate a value to a Result.

    Examples:
        >>> ok(1)
        Ok(value=1)
    """
    return Ok(value)


return_ = ok


def is_result(value: object) -> TypeIs[Ok[object] | Err[object]]:
    """Check if a value is an Ok or an Err."""
    return isinstance(value, Ok | Err)
