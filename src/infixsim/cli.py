from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import InfixError
from .lexer import Lexer
from .machine import convert
from .trace import Cursor


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix to postfix converter.
    '''

    DEFAULT_PROMPT = 'infix> '
    NEXT_PROMPT = '[Enter] next step '
    HEADER = ('#', 'symbol', 'stack', 'output', 'explanation')

    def _format(self, index, step):
        return '\t'.join([str(index), step.current, step.stack,
                          step.output or '-', step.message])

    def _lines(self):
        '''
        Yield converted traces, reporting bad lines on stderr.
        '''
        for line in self.args.expressions:
            # Piped blank lines are just spacing
            if self.args.expressions is stdin and not line.strip():
                continue
            try:
                yield convert(line, strict=self.args.strict)
            # Skip the line, carry on with the next
            except InfixError as e:
                print(e.args[0], file=stderr)

    def _table(self, trace):
        print(*self.HEADER, sep='\t')
        for index, step in enumerate(trace):
            print(self._format(index, step))

    def dumper(self):
        '''
        Print every step of every conversion, then the final postfix.
        '''
        for trace in self._lines():
            self._table(trace)
            print(trace.finalpostfix())

    def executor(self):
        '''
        Print final postfix of every expression.
        '''
        for trace in self._lines():
            if self.args.verbose:
                self._table(trace)
            print(trace.finalpostfix())

    def _position(self, trace, step):
        '''
        Point at the symbol step is working on, if any.
        '''
        if step.position is None:
            return trace.expression
        return '{}\n{}^'.format(trace.expression, ' ' * step.position)

    def player(self):
        '''
        Play back every conversion one step at a time.
        '''
        session = PromptSession() if self._interactive() else None
        for trace in self._lines():
            cursor = Cursor(trace)
            print(*self.HEADER, sep='\t')
            while True:
                step = cursor.current()
                print(self._position(trace, step))
                print(self._format(cursor.index, step))
                if cursor.atend():
                    break
                if session is not None:
                    try:
                        session.prompt(self.NEXT_PROMPT)
                    except EOFError:
                        break
                cursor.advance()
            print('Final postfix:', trace.finalpostfix())

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or self._tty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix to postfix '
                                                          'converter')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--strict',
                                          action='store_true',
                                          help='reject unbalanced '
                                               'parentheses and unknown '
                                               'symbols')
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
                                      ('-D', '--dump', self.dumper),
                                      ('-S', '--step', self.player)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _tty(self):
        '''
        Return True if both stdin/out are a tty.
        '''
        try:
            return isatty(stdin.fileno()) and isatty(stdout.fileno())
        # Replaced streams without a file descriptor
        except (OSError, ValueError):
            return False

    def _interactive(self):
        '''
        Return True if there is somebody to wait on between steps.
        '''
        return (isinstance(self.args.expressions, InteractiveInput) or
                bool(self.args.prompt) or self._tty())

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
