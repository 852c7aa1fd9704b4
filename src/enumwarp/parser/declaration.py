"""
Extract enum constants from Java-like source text.

Two declaration styles are recognised:

    enum Status { OK(0, "Green"), NG(1, "Red"); }   -> paren mode
    enum Color { RED, GREEN, BLUE; }                -> bare mode

The mode is decided once per declaration: if any constant in the value
section carries an argument list, the whole section is read in paren
mode and constants without arguments are ignored.
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tokens import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# A constant's key plus up to three literal fields, all as text
ValueTuple = Tuple[str, ...]

# Literals kept per constant; later ones are matched but dropped
MAX_LITERALS = 3

_ENUM_HEADER = re.compile(r'\benum\s+(\S+)')
_CONSTANT_NAME = re.compile(r'[A-Z_][A-Z0-9_]*')
_BOOLEAN_LITERALS = ('true', 'false')


@dataclass(frozen=True)
class EnumDeclaration:
    """An enum's raw name and its constants in declaration order."""
    name: str
    values: Tuple[ValueTuple, ...]


def parse_enum_declaration(source: str) -> Optional[EnumDeclaration]:
    """
    Parse the first enum declaration in source.

    The value section runs from just after the enum name to the first
    semicolon. Returns None if there is no `enum <Name>` header or no
    terminating semicolon; a declaration with no recognisable constants
    comes back with an empty values tuple.
    """
    header = _ENUM_HEADER.search(source)
    if not header:
        return None

    end = source.find(';', header.end())
    if end < 0:
        return None

    name = header.group(1)
    tokens = tokenize(source[header.end():end])

    if _has_paren_entry(tokens):
        values = _scan_paren_entries(tokens)
    else:
        values = _scan_bare_entries(tokens)

    logger.debug(f"Parsed enum {name}: {len(values)} values")
    return EnumDeclaration(name=name, values=tuple(values))


def _is_constant(token: Token) -> bool:
    return token.kind == TokenKind.IDENT and _CONSTANT_NAME.fullmatch(token.text) is not None


def _is_literal(token: Token) -> bool:
    if token.kind in (TokenKind.NUMBER, TokenKind.STRING):
        return True
    return token.kind == TokenKind.IDENT and token.text in _BOOLEAN_LITERALS


def _has_paren_entry(tokens: List[Token]) -> bool:
    """True if some constant is directly followed by a closed parenthesized group."""
    for i in range(len(tokens) - 1):
        if _is_constant(tokens[i]) and tokens[i + 1].kind == TokenKind.LPAREN:
            if any(t.kind == TokenKind.RPAREN for t in tokens[i + 2:]):
                return True
    return False


def _scan_bare_entries(tokens: List[Token]) -> List[ValueTuple]:
    """Every constant name, paired with its ordinal position."""
    names = [t.text for t in tokens if _is_constant(t)]
    return [(name, str(ordinal)) for ordinal, name in enumerate(names)]


def _scan_paren_entries(tokens: List[Token]) -> List[ValueTuple]:
    values = []
    i = 0
    while i < len(tokens):
        entry, next_i = _match_paren_entry(tokens, i)
        if entry is None:
            i += 1
            continue
        values.append(entry)
        i = next_i
    return values


def _match_paren_entry(tokens: List[Token], start: int) -> Tuple[Optional[ValueTuple], int]:
    """
    Match `NAME(lit, lit, ...)` at tokens[start].

    Returns (value_tuple, index after the closing paren), or (None, start)
    when the tokens there do not form a complete entry.
    """
    n = len(tokens)
    if start + 1 >= n or not _is_constant(tokens[start]) or tokens[start + 1].kind != TokenKind.LPAREN:
        return None, start

    literals = []
    i = start + 2
    while i < n and _is_literal(tokens[i]):
        literals.append(tokens[i].text)
        i += 1
        if i < n and tokens[i].kind == TokenKind.COMMA:
            i += 1
            continue
        if i < n and tokens[i].kind == TokenKind.RPAREN:
            return (tokens[start].text, *literals[:MAX_LITERALS]), i + 1
        break

    logger.debug(f"Skipping {tokens[start].text}: argument list is not all literals")
    return None, start
