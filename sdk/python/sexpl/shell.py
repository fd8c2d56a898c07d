"""Interactive mode for the SEXPL interpreter. Uses cmd as backend."""

import cmd

from .interpreter import Session
from .lexer import paren_depth
from .log import format_value


class Shell(cmd.Cmd):
    """SEXPL interpreter shell. Variables persist for the whole shell session."""
    intro = "SEXPL interpreter\nType 'help' for more information, 'exit' to leave."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "

    def __init__(self, sess: Session, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self._pending = ""

    def onecmd(self, line):
        # Continuation lines belong to the pending form, even "exit".
        if self._pending:
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Runs a form, or buffers it until its parentheses balance."""
        src = f"{self._pending}\n{line}" if self._pending else line
        if paren_depth(src) > 0:
            self._pending = src
            self.prompt = self.secondary_prompt
            return
        self._pending = ""
        self.prompt = self._tmp_prompt

        result = self.sess.run(src)
        if self.sess.options.echo_results and result != []:
            print(f"=> {format_value(result)}", file=self.stdout)

    def do_help(self, arg):
        """Short intro instead of per-command docs."""
        print("Each line is one form, e.g. (print (add 1 2)).\n\n"
              "Commands: print, add, sub, mult, div, set, get.\n"
              "Variables bound with (set x 5) stay available through (get x)\n"
              "until the shell exits. Unbalanced lines continue on the next prompt.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    def cmdloop(self, intro=None):
        while True:
            try:
                return super().cmdloop(intro)
            except KeyboardInterrupt:
                print("^C", file=self.stdout)
                self._pending = ""
                self.prompt = self._tmp_prompt
                intro = ""
