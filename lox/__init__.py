# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .errors import Diagnostics, LoxError, LoxRuntimeError, ParseError
from .interpreter import Interpreter
from .parser import Parser
from .runner import Lox, run_program
from .scanner import Scanner

__all__ = [
    'Diagnostics',
    'Interpreter',
    'Lox',
    'LoxError',
    'LoxRuntimeError',
    'ParseError',
    'Parser',
    'Scanner',
    'run_program',
]
