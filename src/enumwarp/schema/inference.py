"""Heuristic column type inference over textual enum values"""
import re
from enum import Enum
from typing import List, Sequence

_INTEGER = re.compile(r'[0-9]+')
_BOOLEANS = ('true', 'false')


class ColumnType(str, Enum):
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    STRING = 'string'


def transpose(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """
    Collect values by column position.

    Ragged rows only contribute to the columns they actually have:
    transpose([["a", "1"], ["b"]]) -> [["a", "b"], ["1"]]
    """
    width = max((len(r) for r in rows), default=0)
    return [[r[c] for r in rows if c < len(r)] for c in range(width)]


def guess_column_type(values: Sequence[str]) -> ColumnType:
    """
    Pick the narrowest type every value fits.

    Boolean is tested before integer. A column with no values is a string.
    """
    if not values:
        return ColumnType.STRING
    if all(v in _BOOLEANS for v in values):
        return ColumnType.BOOLEAN
    if all(_INTEGER.fullmatch(v) for v in values):
        return ColumnType.INTEGER
    return ColumnType.STRING


def guess_schema(rows: Sequence[Sequence[str]]) -> List[ColumnType]:
    """
    Guess one type per column position, up to the longest row.

    Examples:
        guess_schema([["something", "123"], ["string", "123"]])  # [STRING, INTEGER]
        guess_schema([["true"], ["false"]])                      # [BOOLEAN]
        guess_schema([["123"], ["not_number"]])                  # [STRING]
        guess_schema([["1st column"], ["1st", "2nd"]])           # [STRING, STRING]
    """
    return [guess_column_type(column) for column in transpose(rows)]
