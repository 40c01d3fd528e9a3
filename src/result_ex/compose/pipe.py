"""pipe() function for threading a Result through curried combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')


# Overloads for type inference (up to 5 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...


def pipe(value: Any, /, *fns: Callable[..., Any]) -> Any:
    """Thread a value through functions left to right.

    Each function receives exactly what the previous one returned; nothing
    is wrapped or unwrapped. Combined with the curried forms of `map`,
    `bind` and `appl`, this reads like a pipeline of Result steps, and the
    combinators themselves take care of short-circuiting on Err.

    Args:
        value: The initial value, usually a Result.
        *fns: One-argument functions to apply in sequence.

    Returns:
        The output of the last function, or value if none were given.

    Example:
        ```python
        pipe(Ok(5), map(lambda x: x + 1), map(str))
        # Ok(value='6')

        pipe(Ok(lambda a, b: a * b), appl(Ok(6)), appl(Ok(7)))
        # Ok(value=42)

        pipe(Err('fail'), map(lambda x: x + 1))
        # Err(error='fail')
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current
