"""
Tokenizer for the value section of an enum declaration.

Only the shapes the declaration scanner cares about get their own kind:
identifiers, numerals, quoted strings and the three punctuation marks
that frame a constant's argument list. Comments and whitespace are
dropped; anything else becomes an OTHER token so the scanner can
reject it.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(Enum):
    IDENT = 'ident'
    NUMBER = 'number'
    STRING = 'string'
    LPAREN = 'lparen'
    RPAREN = 'rparen'
    COMMA = 'comma'
    OTHER = 'other'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str       # STRING tokens hold the unquoted value
    pos: int


_TOKEN_PATTERN = re.compile(r"""
    (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<space>\s+)
  | "(?P<dquote>[^"\n]*)"
  | '(?P<squote>[^'\n]*)'
  | (?P<number>[0-9]+(?:\.[0-9]+)?)
  | (?P<ident>[A-Za-z_$][A-Za-z0-9_$]*)
  | (?P<lparen>\()
  | (?P<rparen>\))
  | (?P<comma>,)
  | (?P<other>.)
""", re.VERBOSE | re.DOTALL)

_KIND_BY_GROUP = {
    'dquote': TokenKind.STRING,
    'squote': TokenKind.STRING,
    'number': TokenKind.NUMBER,
    'ident': TokenKind.IDENT,
    'lparen': TokenKind.LPAREN,
    'rparen': TokenKind.RPAREN,
    'comma': TokenKind.COMMA,
    'other': TokenKind.OTHER,
}


def tokenize(text: str) -> List[Token]:
    """Split text into tokens, skipping whitespace and comments."""
    tokens = []
    for match in _TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        if group in ('comment', 'space'):
            continue
        tokens.append(Token(_KIND_BY_GROUP[group], match.group(group), match.start()))
    return tokens
