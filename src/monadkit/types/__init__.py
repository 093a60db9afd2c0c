"""Base types: Option, Result, Reader, Writer, Tagged."""

from monadkit.types.option import Nothing, NothingType, Option, Some, from_nullable
from monadkit.types.reader import Reader, ask, asks
from monadkit.types.result import Err, Ok, Result, collect, from_try
from monadkit.types.tagged import Tagged
from monadkit.types.writer import Writer, tell

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Reader',
    'Result',
    'Some',
    'Tagged',
    'Writer',
    'ask',
    'asks',
    'collect',
    'from_nullable',
    'from_try',
    'tell',
]
