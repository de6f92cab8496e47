"""Error types and the diagnostic sink.

Static errors (scanning and parsing) and runtime errors are both written
through to the error stream as soon as they are reported. The sink also
remembers that an error happened so the caller can pick an exit status.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from termcolor import colored

from .token import Token, TokenType


class LoxError(Exception):
    """Base class for errors raised by the Lox front end."""


class ParseError(LoxError):
    """Raised inside the parser to unwind to the nearest statement boundary."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class LoxRuntimeError(LoxError):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token


class BreakSignal(Exception):
    """Internal exception to leave the innermost loop."""


class ContinueSignal(Exception):
    """Internal exception to skip to the next loop iteration."""


class Diagnostics:
    """Collects errors from every stage and reports them to the error stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.had_error = False
        self.had_runtime_error = False

    @property
    def stream(self) -> TextIO:
        # resolved lazily so redirected stderr (e.g. under pytest) is honoured
        return self._stream if self._stream is not None else sys.stderr

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str, about: Optional[str] = None):
        label = colored('Error', 'red', attrs=['bold'])
        print(f"[line {line}] {label}: {message}", file=self.stream)
        if about is not None:
            print(f"About: {about}", file=self.stream)
        self.had_error = True

    def token_error(self, token: Token, message: str):
        about = 'end' if token.type == TokenType.EOF else token.lexeme
        self.error(token.line, message, about)

    def runtime_error(self, error: LoxRuntimeError):
        label = colored('Runtime Error', 'red', attrs=['bold'])
        print(f"{label}: {error.message}", file=self.stream)
        self.had_runtime_error = True

    @property
    def failed(self) -> bool:
        return self.had_error or self.had_runtime_error
