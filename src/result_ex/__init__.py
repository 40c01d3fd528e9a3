"""result-ex: Result combinators for railway-oriented programming.

Flat imports (preferred):
    from result_ex import Ok, Err, Result, ok, map, bind, appl, pipe
    from result_ex import unwrap, expect, or_else, or_else_with, to_option
    from result_ex import flatten, flatten_enum

Submodule imports (for organization):
    from result_ex.types import Ok, Err, Some, Nothing
    from result_ex.combinators import map, bind, appl
    from result_ex.compose import pipe
"""

# Combinators
from result_ex.combinators import (
    appl,
    bind,
    expect,
    flatten,
    flatten_enum,
    map,
    or_else,
    or_else_with,
    to_option,
    unwrap,
)

# Composition
from result_ex.compose import pipe

# Configuration
from result_ex._config import ResultConfig, get_config, init
from result_ex._logging import configure_logging, get_logger

# Errors
from result_ex.errors import ArityError, UnknownShape, UnwrapError

# Types
from result_ex.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    is_result,
    ok,
    return_,
)

__all__ = [
    # Errors
    'ArityError',
    # Result types
    'Err',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    # Configuration
    'ResultConfig',
    'Some',
    'UnknownShape',
    'UnwrapError',
    # Combinators
    'appl',
    'bind',
    'configure_logging',
    'expect',
    'flatten',
    'flatten_enum',
    'get_config',
    'get_logger',
    'init',
    'is_result',
    'map',
    'ok',
    'or_else',
    'or_else_with',
    # Composition
    'pipe',
    'return_',
    'to_option',
    'unwrap',
]
