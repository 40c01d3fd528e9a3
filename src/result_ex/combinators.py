"""Combinators over Result values.

Every function here is pure and takes the Result as its first argument, so
chains read like a pipeline. `map`, `bind` and `appl` also have a curried
form that omits the Result and returns a one-argument transformer, for use
with `pipe`:

    ```python
    from result_ex import Ok, bind, map, pipe

    pipe(Ok(4), map(lambda n: n - 4), bind(divide_by))
    ```

Only `unwrap` and `expect` raise; everything else returns a Result (or, for
`or_else`/`or_else_with`/`to_option`, a plain value).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, Final, NoReturn, overload

from result_ex._internal.curry import arity, curry, describe
from result_ex._logging import get_logger
from result_ex.errors import ArityError, UnknownShape, UnwrapError
from result_ex.types.option import Nothing, NothingType, Some
from result_ex.types.result import Err, Ok, Result

__all__ = [
    'appl',
    'bind',
    'expect',
    'flatten',
    'flatten_enum',
    'map',
    'or_else',
    'or_else_with',
    'to_option',
    'unwrap',
]

logger = get_logger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return '<missing>'


_MISSING: Final = _Missing()


# ---------------------------------------------------------------------
# map / bind
# ---------------------------------------------------------------------


@overload
def map[T, U, E](result: Result[T, E], f: Callable[[T], U], /) -> Result[U, E]: ...
@overload
def map[T, U, E](f: Callable[[T], U], /) -> Callable[[Result[T, E]], Result[U, E]]: ...


def map(result: Any, f: Any = _MISSING, /) -> Any:  # noqa: A001
    """Run a function against the value of an Ok.

    An Err is returned unchanged and the function is not called.

    Called with only the function, returns a reusable transformer. The form
    is chosen by argument count alone, so `map(Ok(1))` also returns a
    transformer, one that raises TypeError when applied to an Ok.

    Examples:
        >>> map(Ok(1), lambda n: n + 1)
        Ok(value=2)
        >>> map(Err('Oops'), lambda n: n + 1)
        Err(error='Oops')
        >>> increment = map(lambda n: n + 1)
        >>> increment(Ok(1))
        Ok(value=2)
    """
    if f is _MISSING:
        fn = result
        return lambda res: _map(res, fn)
    return _map(result, f)


def _map(result: Any, f: Callable[[Any], Any]) -> Any:
    if isinstance(result, Ok):
        return Ok(f(result.value))
    return result


@overload
def bind[T, U, E](result: Result[T, E], f: Callable[[T], Result[U, E]], /) -> Result[U, E]: ...
@overload
def bind[T, U, E](f: Callable[[T], Result[U, E]], /) -> Callable[[Result[T, E]], Result[U, E]]: ...


def bind(result: Any, f: Any = _MISSING, /) -> Any:
    """Apply a Result-returning function to the value of an Ok.

    The function's Result is returned as is, without double wrapping. An Err
    is returned unchanged and the function is not called, which is what
    lets a chain of fallible calls stop at the first failure.

    Called with only the function, returns a reusable transformer. As with
    `map`, a lone Result is taken for the function.

    Examples:
        >>> def halve(n):
        ...     return Err('Zero division') if n == 0 else Ok(n / 2)
        >>> bind(halve(4), halve)
        Ok(value=1.0)
        >>> bind(halve(0), halve)
        Err(error='Zero division')
    """
    if f is _MISSING:
        fn = result
        return lambda res: _bind(res, fn)
    return _bind(result, f)


def _bind(result: Any, f: Callable[[Any], Any]) -> Any:
    if isinstance(result, Ok):
        return f(result.value)
    return result


# ---------------------------------------------------------------------
# appl
# ---------------------------------------------------------------------


@overload
def appl[E](
    function_result: Result[Callable[..., Any], E], value_result: Result[Any, E], /
) -> Result[Any, E]: ...
@overload
def appl[E](
    value_result: Result[Any, E], /
) -> Callable[[Result[Callable[..., Any], E]], Result[Any, E]]: ...


def appl(function_result: Any, value_result: Any = _MISSING, /) -> Any:
    """Apply the value of one Result to the function carried by another.

    If the function takes more than one argument the new Ok value is the
    function partially applied, ready for the next `appl`. Once every
    argument is present the function is called and its return value becomes
    the Ok value. A returned Result is not flattened.

    The function Result is checked first: an Err there wins over an Err in
    the value Result. A function taking no positional arguments gives
    `Err(ArityError(...))`.

    Called with only the value Result, returns a transformer that expects
    the function Result. The form is chosen by argument count alone, so a
    lone function Result is taken for the value Result.

    Examples:
        >>> appl(Ok(lambda n: n + 1), Ok(1))
        Ok(value=2)
        >>> add3 = Ok(lambda a, b, c: a + b + c)
        >>> appl(appl(appl(add3, Ok(1)), Ok(2)), Ok(3))
        Ok(value=6)
        >>> appl(Err('no such function'), Ok(1))
        Err(error='no such function')
    """
    if value_result is _MISSING:
        applied = function_result
        return lambda fn_res: _appl(fn_res, applied)
    return _appl(function_result, value_result)


def _appl(function_result: Any, value_result: Any) -> Any:
    if isinstance(function_result, Err):
        return function_result
    if isinstance(value_result, Err):
        return value_result

    fn = function_result.value
    fn_arity = arity(fn)
    if not fn_arity:
        reason = ArityError(describe(fn), fn_arity)
        logger.debug('appl_arity_error', function=reason.function, arity=fn_arity)
        return Err(reason)
    return Ok(curry(fn, value_result.value, fn_arity))


# ---------------------------------------------------------------------
# Unwrapping
# ---------------------------------------------------------------------


def unwrap[T](result: Result[T, Any]) -> T:
    """Return the value of an Ok, or raise on an Err.

    Raises:
        UnwrapError: With the Err payload as `reason`. An exception payload
            is also chained as the cause.

    Examples:
        >>> unwrap(Ok(5))
        5
    """
    if isinstance(result, Ok):
        return result.value
    _raise_unwrap('unwrap_failed', result.error, result.error)


def expect[T](result: Result[T, Any], message: str) -> T:
    """Return the value of an Ok, or raise with the given message on an Err.

    The Err payload is discarded.

    Raises:
        UnwrapError: With `message` as `reason`.

    Examples:
        >>> expect(Ok(5), 'The value was not what was expected')
        5
    """
    if isinstance(result, Ok):
        return result.value
    _raise_unwrap('expect_failed', message, None)


def _raise_unwrap(event: str, reason: Any, cause: Any) -> NoReturn:
    logger.warning(event, reason=repr(reason))
    raise UnwrapError(reason) from (cause if isinstance(cause, BaseException) else None)


def or_else[T](result: Result[T, Any], default: T) -> T:
    """Return the value of an Ok, or the default on an Err.

    Examples:
        >>> or_else(Ok(5), 4)
        5
        >>> or_else(Err('Oops'), 4)
        4
    """
    if isinstance(result, Ok):
        return result.value
    return default


def or_else_with[T, E](result: Result[T, E], f: Callable[[E], T]) -> T:
    """Return the value of an Ok, or f applied to the error of an Err.

    Examples:
        >>> or_else_with(Err('Oops'), lambda err: err + '!')
        'Oops!'
    """
    if isinstance(result, Ok):
        return result.value
    return f(result.error)


def to_option[T](result: Result[T, Any]) -> Some[T] | NothingType:
    """Convert a Result to an Option, dropping any error.

    Examples:
        >>> to_option(Ok(5))
        Some(value=5)
        >>> to_option(Err('Oops')) is Nothing
        True
    """
    if isinstance(result, Ok):
        return Some(result.value)
    return Nothing


# ---------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------


def flatten(result: Any) -> Any:
    """Flatten nested Results into one Result.

    Examples:
        >>> flatten(Ok(Ok(Ok(5))))
        Ok(value=5)
        >>> flatten(Ok(Ok(Err('Oops'))))
        Err(error='Oops')
        >>> flatten(Ok(5))
        Ok(value=5)
    """
    while isinstance(result, Ok) and isinstance(result.value, Ok | Err):
        result = result.value
    return result


def flatten_enum(collection: Any) -> Any:
    """Turn a collection of Results into a Result of a collection.

    Lists and tuples keep their type, iterators (e.g. generators) become
    lists, and mappings become dicts with the same keys. The first Err
    found is returned and nothing after it is looked at. Anything else gives
    `Err(UnknownShape(...))`.

    Examples:
        >>> flatten_enum([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> flatten_enum([Ok(1), Err('Oops'), Ok(3)])
        Err(error='Oops')
        >>> flatten_enum({'a': Ok(1), 'b': Ok(2)})
        Ok(value={'a': 1, 'b': 2})
    """
    if isinstance(collection, Mapping):
        return _flatten_mapping(collection)
    if isinstance(collection, list | tuple | Iterator):
        flattened = _flatten_sequence(collection)
        if isinstance(flattened, Ok) and isinstance(collection, tuple):
            return Ok(tuple(flattened.value))
        return flattened
    return _unknown_shape(collection)


def _flatten_sequence(items: Any) -> Any:
    values: list[Any] = []
    for item in items:
        if isinstance(item, Err):
            return item
        if not isinstance(item, Ok):
            return _unknown_shape(item)
        values.append(item.value)
    return Ok(values)


def _flatten_mapping(items: Mapping[Any, Any]) -> Any:
    values: dict[Any, Any] = {}
    for key, item in items.items():
        if isinstance(item, Err):
            return item
        if not isinstance(item, Ok):
            return _unknown_shape(item)
        values[key] = item.value
    return Ok(values)


def _unknown_shape(value: object) -> Err[UnknownShape]:
    reason = UnknownShape(type(value).__name__)
    logger.debug('flatten_enum_unknown_shape', type_name=reason.type_name)
    return Err(reason)
