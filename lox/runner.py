"""Drives the full pipeline: scan, parse, then interpret.

A `Lox` instance keeps one interpreter (and so one global scope) alive
across calls to `run`, which is what the REPL relies on. The diagnostic
flags are cleared at the start of every run.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .ast_printer import print_program
from .errors import Diagnostics, LoxRuntimeError
from .interpreter import Interpreter
from .parser import Parser
from .scanner import Scanner

# exit statuses (sysexits.h)
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


class Lox:
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 print_ast: bool = False, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.interpreter = Interpreter(self.diagnostics, debug_level=debug_level, debug_file=debug_file)
        self.print_ast = print_ast

    def run(self, source: str) -> bool:
        """Run one unit of source. Returns True when no diagnostic was recorded."""
        self.diagnostics.reset()
        tokens = Scanner(source, self.diagnostics).scan_tokens()
        statements = Parser(tokens, self.diagnostics).parse()
        if self.diagnostics.had_error:
            return False
        if self.print_ast:
            try:
                text = print_program(statements)
            except RecursionError:
                self.diagnostics.runtime_error(LoxRuntimeError("Maximum recursion depth exceeded."))
                return False
            if text:
                print(text)
            return True
        return self.interpreter.interpret(statements)

    def run_file(self, path: str) -> int:
        """Run a script file and return the process exit status."""
        try:
            source = Path(path).read_bytes().decode('utf-8')
        except OSError as e:
            print(f"Error: could not read {path}: {e.strerror}", file=sys.stderr)
            return EX_NOINPUT
        except UnicodeDecodeError:
            print(f"Error: {path} is not valid UTF-8", file=sys.stderr)
            return EX_NOINPUT
        self.run(source)
        return EX_DATAERR if self.diagnostics.failed else EX_OK

    def close(self):
        self.interpreter.close()


def run_program(source: str, debug_level: int = 0) -> Diagnostics:
    """Convenience function to scan, parse and run a Lox program from a string."""
    lox = Lox(debug_level=debug_level)
    try:
        lox.run(source)
    finally:
        lox.close()
    return lox.diagnostics
