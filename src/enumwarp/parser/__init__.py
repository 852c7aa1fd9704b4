"""Enum declaration parsing"""
from .declaration import EnumDeclaration, ValueTuple, parse_enum_declaration
from .tokens import Token, TokenKind, tokenize
