"""Runs Atto programs from files, or starts the interactive prompt. Called from the atto console script."""

import argparse
import logging
import sys
from pathlib import Path

from atto import __version__
from atto.config import get_log_level
from atto.debug_utils.pprint import format_definition
from atto.errors import AttoError
from atto.interpreter import Interpreter
from atto.shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atto", description="Atto interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to the interactive prompt)", nargs="?")
    parser.add_argument("args", help="string arguments passed to main", nargs="*")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the core library")
    parser.add_argument("--dump-ast", action="store_true",
                        help="print the file's definitions with explicit grouping and exit")
    parser.add_argument("--log-level", default=get_log_level(),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="logging level (default: $ATTO_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """Runs the atto interpreter and returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')

        if args.file is None:
            Shell(interp).cmdloop()
            return 0

        code = Path(args.file).read_text(encoding="utf-8")
        if args.dump_ast:
            for fdef in interp.load(code):
                print(format_definition(fdef))
            return 0

        interp.run(code, args.args)
        return 0

    except AttoError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: could not open '{args.file}': {e.strerror}", file=sys.stderr)
        return 1
