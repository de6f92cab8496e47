"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [--print-ast] [script]

Options:
  -v            Increase debug verbosity (can be repeated)
  --print-ast   Print the parsed program in prefix form instead of running it

With no script the interpreter starts an interactive prompt. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys

from .runner import EX_USAGE, Lox
from .shell import Shell


class UsageParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with EX_USAGE instead of 2."""
    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(EX_USAGE)


def main(argv: list[str] | None = None) -> None:
    parser = UsageParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--print-ast', action='store_true', help='print the AST instead of running the program')
    parser.add_argument('script', nargs='*', help='Lox script to execute (omit for interactive mode)')
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print("Usage: lox [script]", file=sys.stderr)
        sys.exit(EX_USAGE)

    lox = Lox(debug_level=args.v, print_ast=args.print_ast)
    try:
        if args.script:
            status = lox.run_file(args.script[0])
        else:
            Shell(lox).cmdloop()
            status = 0
    finally:
        lox.close()
    sys.exit(status)


if __name__ == '__main__':
    main()
