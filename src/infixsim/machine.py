from collections import deque

from .classifier import precedence, OPEN
from .lexer import Lexer
from .trace import Step, Trace, EMPTY, START, END
from .util import EmptyInputError, MalformedExpressionError


class Machine:
    '''
    Operator precedence stack machine (infix to postfix converter).

    Takes symbols one at a time and records a step after every change to its
    stack or output. One machine per conversion; see generate().
    '''

    MESSAGES = {
        'start': 'Starting conversion...',
        'operand': 'Operand \N{RIGHTWARDS ARROW} added to output',
        'open': "'(' pushed",
        'pop': "Popping until '('",
        'close': "Removed '('",
        'unmatched': "No '(' to remove",
        'precedence': 'Popped due to precedence',
        'push': 'Operator pushed',
        'drain': "Popped '{}'",
    }

    def __init__(self, strict=False):
        '''
        Create machine with empty stack and output.

        :param strict: Raise MalformedExpressionError on unbalanced
                       parentheses and unknown symbols, rather than carrying
                       on regardless.
        '''
        self.stack = deque()
        self.output = []
        self.steps = []
        self.strict = strict
        # Index of the symbol being fed, None before and after the scan.
        self.position = None
        self._record(START, 'start', 'start')

    def _snapshot(self):
        '''
        Copy of the stack, top first.
        '''
        if not self.stack:
            return EMPTY
        return ''.join(reversed(self.stack))

    def _record(self, current, kind, message, *args):
        self.steps.append(Step(current=current,
                               stack=self._snapshot(),
                               output=''.join(self.output),
                               message=self.MESSAGES[message].format(*args),
                               kind=kind,
                               position=self.position))

    def _pshstack(self, symbol):
        self.stack.append(symbol)

    def _popstack(self):
        '''
        Pop top of stack onto output, returning it.
        '''
        top = self.stack.pop()
        self.output.append(top)
        return top

    def feed(self, groups):
        '''
        Process the next symbol.

        :param groups: Lexeme groups of the symbol, by name.
        '''
        self.position = 0 if self.position is None else self.position + 1
        (kind, c), = groups.items()
        if kind == 'operand':
            self.output.append(c)
            self._record(c, 'operand', 'operand')
        elif kind == 'open':
            self._pshstack(c)
            self._record(c, 'open', 'open')
        elif kind == 'close':
            self._close(c)
        elif kind == 'operator':
            self._operator(c)
        elif self.strict:
            raise MalformedExpressionError('Unknown symbol {}'.format(repr(c)))

    def _close(self, c):
        while self.stack and self.stack[-1] != OPEN:
            self._popstack()
            self._record(c, 'pop', 'pop')
        if self.stack:
            self.stack.pop()
            self._record(c, 'close', 'close')
        elif self.strict:
            raise MalformedExpressionError("Unmatched ')'")
        else:
            # Nothing to discard; still a step, so every ')' shows up.
            self._record(c, 'close', 'unmatched')

    def _operator(self, c):
        # >= rather than >: equal precedence pops, so ^ groups to the left.
        while self.stack and precedence(self.stack[-1]) >= precedence(c):
            self._popstack()
            self._record(c, 'pop', 'precedence')
        self._pshstack(c)
        self._record(c, 'push', 'push')

    def drain(self):
        '''
        Pop everything left on the stack, discarding stray '('.
        '''
        self.position = None
        while self.stack:
            top = self.stack.pop()
            if top == OPEN:
                if self.strict:
                    raise MalformedExpressionError("Unmatched '('")
            else:
                self.output.append(top)
            self._record(END, 'drain', 'drain', top)

    @property
    def postfix(self):
        return ''.join(self.output)


def generate(expression, strict=False):
    '''
    Convert expression to postfix, returning the trace of the conversion.

    Whitespace is ignored. Nothing else is validated unless strict.
    '''
    lexer = Lexer()
    machine = Machine(strict=strict)
    for match in lexer.lex(expression):
        machine.feed(lexer.matchedgroups(match))
    machine.drain()
    return Trace(machine.steps, machine.postfix, lexer.normalize(expression))


def convert(text, strict=False):
    '''
    Convert user supplied text, refusing empty or blank text.
    '''
    if not Lexer().normalize(text):
        raise EmptyInputError()
    return generate(text, strict=strict)
