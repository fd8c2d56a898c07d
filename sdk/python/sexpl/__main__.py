"""CLI: python -m sexpl [program.sxp] [--tokens] [--ast] [--no-color]"""

import argparse
import sys
from pathlib import Path

from .interpreter import Session
from .shell import Shell
from .types import Options


def _read_source(path):
    """Program text from `path`, or stdin when path is None. Exits 1 if unreadable."""
    name = path if path is not None else "<stdin>"
    try:
        if path is None:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        reason = f"not valid UTF-8 at byte {e.start}"
    except OSError as e:
        reason = e.strerror or str(e)
    print(f"sexpl: cannot read '{name}': {reason}", file=sys.stderr)
    sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="sexpl")
    parser.add_argument("file", nargs="?", help="program to run (if empty, reads stdin or starts the shell)")
    parser.add_argument("--tokens", action="store_true", help="print the token list before running")
    parser.add_argument("--ast", action="store_true", help="print the parsed tree before running")
    parser.add_argument("--no-color", action="store_true", help="plain diagnostics")
    args = parser.parse_args(argv)

    options = Options(color=not args.no_color, show_tokens=args.tokens, show_ast=args.ast)
    sess = Session(options=options)

    if args.file is not None or not sys.stdin.isatty():
        sess.run(_read_source(args.file))
    else:
        Shell(sess).cmdloop()


if __name__ == "__main__":
    main()
