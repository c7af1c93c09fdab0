"""Interactive prompt for the Atto interpreter. Uses cmd as backend."""

import cmd

from atto.debug_utils.pprint import format_definition, format_expr
from atto.errors import AttoError
from atto.interpreter import Interpreter
from atto.reader.lexer import lex
from atto.reader.parser import parse_program
from atto.types.values import to_str


class Shell(cmd.Cmd):
    """Atto interpreter shell."""
    intro = ("Welcome to the Atto prompt.\n"
             "Lines starting with 'fn' define functions; anything else is evaluated.\n"
             "Type 'help' for more information.")
    prompt = ">> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interpreter

    def default(self, line):
        """Defines a function or evaluates an expression."""
        try:
            tokens = lex(line)
            if not tokens:
                return  # comment-only line
            if tokens[0].kind == "identifier" and tokens[0].text == "fn":
                for fdef in self.interp.load(line):
                    self.stdout.write(f"defined {fdef.signature()}\n")
            else:
                self.stdout.write(to_str(self.interp.eval_expr(line)) + "\n")
        except AttoError as e:
            self.stdout.write(f"error: {e}\n")

    def do_ast(self, arg):
        """Shows how an expression or definition is grouped: ast + 1 * 2 3"""
        try:
            tokens = lex(arg)
            if tokens and tokens[0].text == "fn":
                arities = self.interp.arities.copy()
                for fdef in parse_program(arg, arities):
                    self.stdout.write(format_definition(fdef) + "\n")
            else:
                self.stdout.write(format_expr(self.interp.parse_expr(arg)) + "\n")
        except AttoError as e:
            self.stdout.write(f"error: {e}\n")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write(
            "Atto is a prefix language without brackets: every function takes a fixed\n"
            "number of arguments, and that number decides where each expression ends.\n\n"
            "Try '+ 1 * 2 3', then 'fn sq x is * x x' followed by 'sq 7'.\n"
            "'ast <code>' prints the code with its grouping made explicit.\n"
        )

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
