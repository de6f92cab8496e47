"""Interactive mode for the Lox interpreter. Uses cmd as backend."""

import cmd

from .runner import Lox


class Shell(cmd.Cmd):
    """Lox read-eval-print loop. Every line is run on its own, sharing one global scope."""
    intro = "Lox interpreter :: Python backend\nType 'exit' or press Ctrl-D to leave."
    prompt = "> "

    def __init__(self, lox: Lox, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lox = lox

    def onecmd(self, line):
        command, arg, line = self.parseline(line)
        # Lox statements share the command namespace, so only bare words are commands
        if command in ('EOF', 'exit') and not arg:
            return getattr(self, 'do_' + command)(arg)
        if not line:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Runs one line of Lox source."""
        self.lox.run(line)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write('\n')
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
