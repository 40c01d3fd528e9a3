"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from result_ex.types.option import Nothing, NothingType, Option, Some
from result_ex.types.result import Err, Ok, Result, is_result, ok, return_

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'is_result',
    'ok',
    'return_',
]
