from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession, prompt

from .util import RPNError
from .lexer import Lexer
from .operators import OPERATORS, UNARY, lookup
from .pipeline import process, strip


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Keep each RPN and result on screen.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    CONFIRM_PROMPT = 'Continue? (y/n) '
    YES = frozenset({'y', 'Y'})
    NO = frozenset({'n', 'N'})

    def dumper(self):
        '''
        Dump all tokens, with precedence and associativity of operators.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(lexeme)>\t<rank>\t<associativity>')
        for line in self.args.expressions:
            stripped, _ = strip(line)
            try:
                for token in lexer.lex(stripped):
                    spec = lookup(token.lexeme) if token.kind.isoperator \
                        else None
                    print(token.kind,
                          repr(token.lexeme),
                          spec and spec.rank,
                          spec and spec.associativity,
                          sep='\t')
            except RPNError as e:
                self.failed = True
                print(e, file=sys.stderr)

    def executor(self):
        '''
        Convert and evaluate each expression, printing RPN and result.
        '''
        if self._interactive() and not self.args.quiet:
            self.printhelp()
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                print(process(line))
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                self.failed = True
                print(e, file=sys.stderr)
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)
            if self.args.confirm and not self._confirm():
                break

    def raw_grammar(self):
        '''
        Print current internally defined grammar, in matching order.
        '''
        lexer = Lexer()
        for kind, pattern in lexer.grammar():
            print(kind, pattern.strip(), sep='\t')

    def printhelp(self):
        '''
        Print what this is, and the supported operators.
        '''
        binary = [symbol
                  for symbol, spec
                  in OPERATORS.items()
                  if spec.arity == 2]
        print('Converts an arithmetic expression in infix notation to Reverse '
              'Polish Notation, and evaluates it.', file=sys.stderr)
        print('unary operators:', *UNARY, file=sys.stderr)
        print('binary operators:', *binary, file=sys.stderr)
        print('Press Ctrl-D to quit.', file=sys.stderr)

    def _confirm(self):
        '''
        Ask whether to go on. Anything but yes or no is taken as no.
        '''
        try:
            if self._interactive():
                answer = prompt(self.CONFIRM_PROMPT)
            else:
                answer = input(self.CONFIRM_PROMPT)
        except EOFError:
            return False
        answer = answer.strip()
        if answer in self.YES:
            return True
        if answer not in self.NO:
            print('Invalid answer {!r}, quitting.'.format(answer),
                  file=sys.stderr)
        return False

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix to RPN converter and calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='print tracebacks on errors')
        self.argument_parser.add_argument('-q', '--quiet',
                                          action='store_true',
                                          help="don't print help on start")
        self.argument_parser.add_argument('-c', '--confirm',
                                          action='store_true',
                                          help='ask to continue after each '
                                               'expression')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)
        self.failed = False

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status: 1 if any non-interactive expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        # The grammar needs no input, tty or not.
        if self.args.expressions is sys.stdin and \
           self.args.action != self.raw_grammar:
            self.args.expressions = self._prompting_input()
        self.failed = False
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
        return int(self.failed and not self._interactive())
