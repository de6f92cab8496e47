"""Scanner for the Lox language.

The scanner walks the source one character at a time and groups the
characters into tokens. Malformed input (an unexpected character or a
string that never closes) is reported to the diagnostic sink and skipped,
so a single pass surfaces every lexical error in the source.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import Diagnostics
from .token import KEYWORDS, Token, TokenType

SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# first char -> (type when followed by '=', type otherwise)
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

ESCAPES = {'n': '\n', 't': '\t', '"': '"', '\\': '\\'}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source: str, diagnostics: Diagnostics):
        self.source = source
        self.diagnostics = diagnostics
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def add_token(self, token_type: TokenType, literal: Optional[str] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
            return
        if c in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[c]
            self.add_token(with_equal if self.match('=') else alone)
            return
        if c == '&' and self.match('&'):
            self.add_token(TokenType.AND_AND)
            return
        if c == '|' and self.match('|'):
            self.add_token(TokenType.OR_OR)
            return
        if c == '/':
            if self.match('/'):
                # line comment runs to the end of the line
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
            return
        if c in ' \r\t':
            return
        if c == '\n':
            self.line += 1
            return
        if c == '"':
            self.string()
            return
        if is_digit(c):
            self.number()
            return
        if is_alpha(c):
            self.identifier()
            return
        self.diagnostics.error(self.line, f"Unexpected character: '{c}'.")

    def string(self):
        start_line = self.line
        chars: List[str] = []
        while self.peek() != '"' and not self.is_at_end():
            c = self.advance()
            if c == '\n':
                self.line += 1
            if c == '\\' and not self.is_at_end():
                escaped = self.advance()
                if escaped == '\n':
                    self.line += 1
                chars.append(ESCAPES.get(escaped, '\\' + escaped))
                continue
            chars.append(c)

        if self.is_at_end():
            self.diagnostics.error(start_line, "Unterminated string.")
            return

        self.advance()  # closing quote
        self.add_token(TokenType.STRING, ''.join(chars))

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # a fractional part needs at least one digit after the dot
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenType.NUMBER, self.source[self.start:self.current])

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER), text)


def scan(source: str, diagnostics: Diagnostics) -> List[Token]:
    """Convenience wrapper returning the token list for `source`."""
    return Scanner(source, diagnostics).scan_tokens()
